"""Output formatting utilities"""

import json
import sys
from typing import Any, Dict, Iterable, Sequence
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from modulator_core import (
    AnalogSquareOscillator,
    DigitalSquareOscillator,
    ModulatedSource,
    ModulationSource,
    SinOscillator,
)
from modulator_io import WaveformData, WaveformSample


def describe_source(source: ModulationSource) -> Dict[str, Any]:
    """Describe a source tree as nested plain data

    Args:
        source: Root of the tree

    Returns:
        Dictionary with a "type" key plus the source's parameters
    """
    if isinstance(source, ModulatedSource):
        return {
            "type": "modulated",
            "base_source": describe_source(source.base_source),
            "modulator": describe_source(source.modulator),
        }
    if isinstance(source, AnalogSquareOscillator):
        return {
            "type": "analog_square",
            "rate": source.rate,
            "amplitude": source.amplitude,
            "rise_time": source.rise_time,
            "fall_time": source.fall_time,
        }
    if isinstance(source, DigitalSquareOscillator):
        return {"type": "digital_square", "rate": source.rate, "amplitude": source.amplitude}
    if isinstance(source, SinOscillator):
        return {"type": "sine", "rate": source.rate, "amplitude": source.amplitude}
    return {"type": type(source).__name__}


def _source_label(info: Dict[str, Any]) -> str:
    params = ", ".join(
        f"{key}={value:g}" for key, value in info.items()
        if key != "type" and isinstance(value, (int, float))
    )
    return f"[cyan]{info['type']}[/cyan]({params})" if params else f"[cyan]{info['type']}[/cyan]"


def _build_tree(info: Dict[str, Any], tree: Tree) -> None:
    if info["type"] == "modulated":
        branch = tree.add("[magenta]+[/magenta] modulated")
        _build_tree(info["base_source"], branch)
        _build_tree(info["modulator"], branch)
    else:
        tree.add(_source_label(info))


class OutputFormatter:
    """Handles output formatting for JSON and human-readable modes"""

    def __init__(self, json_mode: bool = False, console: Console = None):
        """Initialize output formatter

        Args:
            json_mode: Enable JSON output mode
            console: Rich console instance (for human mode)
        """
        self.json_mode = json_mode
        self.console = console or Console()

    def success(self, message: str, data: Any = None) -> None:
        """Output success message

        Args:
            message: Success message
            data: Optional data to include
        """
        if self.json_mode:
            output = {
                "status": "success",
                "message": message,
                "data": data
            }
            print(json.dumps(output, indent=2))
        else:
            self.console.print(f"[green]✓[/green] {escape(message)}")
            if data and isinstance(data, dict):
                for key, value in data.items():
                    self.console.print(f"  {key}: {escape(str(value))}")

    def error(self, message: str, details: str = None) -> None:
        """Output error message

        Args:
            message: Error message
            details: Optional error details
        """
        if self.json_mode:
            output = {
                "status": "error",
                "message": message,
                "details": details
            }
            print(json.dumps(output, indent=2), file=sys.stderr)
        else:
            # Rich's print() has no file argument; write through a stderr console
            err_console = Console(stderr=True)
            err_console.print(f"[red]✗[/red] {escape(message)}")
            if details:
                err_console.print(f"  {escape(details)}")

    def info(self, message: str) -> None:
        """Output info message (human mode only)

        Args:
            message: Info message
        """
        if not self.json_mode:
            self.console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def table(self, title: str, columns: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
        """Output a table

        In JSON mode rows are emitted as objects keyed by lowercased column name.

        Args:
            title: Table title
            columns: Column headers
            rows: Row values, one sequence per row
        """
        rows = [list(row) for row in rows]
        if self.json_mode:
            keys = [c.lower() for c in columns]
            self.success(title, [dict(zip(keys, row)) for row in rows])
            return

        table = Table(title=title)
        for i, column in enumerate(columns):
            # Keep the first (key) column on one line
            table.add_column(column, no_wrap=(i == 0))
        for row in rows:
            table.add_row(*(escape(str(v)) for v in row))
        self.console.print(table)

    def source_tree(self, title: str, source: ModulationSource) -> None:
        """Output the structure of a source tree

        Args:
            title: Root label
            source: Root of the tree
        """
        info = describe_source(source)
        if self.json_mode:
            self.success(title, info)
            return

        tree = Tree(f"[bold]{escape(title)}[/bold]")
        _build_tree(info, tree)
        self.console.print(tree)

    def waveform(self, data: WaveformData, preview: int, saved_to: str = None) -> None:
        """Output a waveform summary, plus either the save path or a sample preview

        Args:
            data: Sampled waveform
            preview: Number of leading samples to show when not saved
            saved_to: Path the waveform was written to, if any
        """
        if self.json_mode:
            summary = {
                "name": data.name,
                "description": data.description,
                "duration": data.duration,
                "sample_rate": data.sample_rate,
                "sample_count": data.sample_count,
            }
            if saved_to is not None:
                summary["path"] = saved_to
            else:
                summary["samples"] = [
                    s.model_dump(by_alias=True) for s in data.samples[:preview]
                ]
            self.success(f"Generated {data.name}", summary)
            return

        self.console.print(f"Generated {escape(data.name)}")
        self.console.print(f"Description: {escape(data.description)}")
        self.console.print(f"Duration: {data.duration:g}s, Samples: {data.sample_count}")
        if saved_to is not None:
            self.console.print(f"Data saved to: {escape(saved_to)}")
        else:
            self.console.print(f"Sample values (first {preview}):")
            for sample in data.samples[:preview]:
                self.console.print(f"  {_format_sample(sample)}")


def _format_sample(sample: WaveformSample) -> str:
    return f"t={sample.time:.3f}s: {sample.value:.6f}"
