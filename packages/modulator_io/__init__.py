"""Sampling, JSON export and patch files for Modulator sources."""

from .patch_loader import load_patch, load_patch_from_file
from .patch_models import AnalogSquareNode, DigitalSquareNode, Patch, SineNode
from .sampler import (
    DEFAULT_DURATION,
    DEFAULT_SAMPLE_RATE,
    generate_waveform_data,
    load_waveform_data,
    sample_times,
    save_waveform_data,
)
from .waveform_models import WaveformData, WaveformSample

__all__ = [
    "DEFAULT_DURATION",
    "DEFAULT_SAMPLE_RATE",
    "WaveformData",
    "WaveformSample",
    "generate_waveform_data",
    "sample_times",
    "save_waveform_data",
    "load_waveform_data",
    "Patch",
    "SineNode",
    "DigitalSquareNode",
    "AnalogSquareNode",
    "load_patch",
    "load_patch_from_file",
]
