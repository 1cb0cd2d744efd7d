"""
Sampling harness.

Queries a modulation source at evenly spaced times and collects the results
into WaveformData ready for export.
"""

from __future__ import annotations

import logging
from pathlib import Path

from modulator_core import ModulationSource

from .waveform_models import WaveformData, WaveformSample

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 1.0
DEFAULT_SAMPLE_RATE = 1000.0


def sample_times(duration: float, sample_rate: float) -> list[float]:
    """
    Times at which a source is sampled.

    Returns int(duration * sample_rate) times, the i-th being i / sample_rate.
    """
    count = int(duration * sample_rate)
    return [i / sample_rate for i in range(count)]


def generate_waveform_data(
    source: ModulationSource,
    name: str,
    description: str,
    duration: float = DEFAULT_DURATION,
    sample_rate: float = DEFAULT_SAMPLE_RATE,
) -> WaveformData:
    """
    Sample a source into WaveformData.

    Args:
        source: Source to query
        name: Display name stored in the export
        description: Free-text description stored in the export
        duration: Seconds to sample (>= 0)
        sample_rate: Samples per second (> 0)

    Returns:
        WaveformData with int(duration * sample_rate) samples

    Raises:
        pydantic.ValidationError: If duration or sample_rate is out of range
    """
    # Validate metadata before touching the source
    data = WaveformData(
        name=name,
        description=description,
        duration=duration,
        sample_rate=sample_rate,
    )

    data.samples = [
        WaveformSample(time=t, value=source.evaluate(t))
        for t in sample_times(duration, sample_rate)
    ]
    logger.debug(
        f"Sampled '{name}': {data.sample_count} samples "
        f"({duration}s @ {sample_rate}Hz)"
    )
    return data


def save_waveform_data(data: WaveformData, file_path: Path | str) -> Path:
    """
    Write WaveformData as indented wire-format JSON.

    Parent directories are created as needed.

    Returns:
        The path written
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data.to_json(), encoding="utf-8")
    logger.info(f"Saved waveform '{data.name}' to {path}")
    return path


def load_waveform_data(file_path: Path | str) -> WaveformData:
    """
    Read wire-format JSON written by save_waveform_data.

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If the document doesn't match the format
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Waveform file not found: {path}")
    return WaveformData.from_json(path.read_text(encoding="utf-8"))
