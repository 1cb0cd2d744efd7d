"""Main CLI entry point"""

import logging

import click
from rich.console import Console
from modulator_cli.config import settings
from modulator_cli.utils.output import OutputFormatter
from modulator_cli.commands.examples import list_examples
from modulator_cli.commands.run import run
from modulator_cli.commands.render import render
from modulator_cli.commands.describe import describe


def setup_logging(verbose: bool = False) -> None:
    """Configure logging"""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.option('--json', 'json_mode', is_flag=True, help='Output as JSON')
@click.option('--verbose', is_flag=True, help='Verbose output')
@click.pass_context
def cli(ctx, json_mode: bool, verbose: bool):
    """Modulator CLI - sample and export composable signal sources

    Examples:
        modulator list
        modulator run basic-sine
        modulator run vibrato vibrato.json
        modulator render patch.yaml
        modulator --json describe multi-osc
    """
    setup_logging(verbose)

    # Initialize context
    ctx.ensure_object(dict)
    ctx.obj.setdefault('settings', settings)

    # Initialize output formatter
    ctx.obj['formatter'] = OutputFormatter(json_mode=json_mode, console=Console())


# Register commands
cli.add_command(list_examples)
cli.add_command(run)
cli.add_command(render)
cli.add_command(describe)


if __name__ == '__main__':
    cli()
