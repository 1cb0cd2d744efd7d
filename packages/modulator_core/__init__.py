"""Modulator core - composable periodic signal sources."""

from .exceptions import (
    InvalidSourceError,
    ModulatorError,
    PatchError,
    UnknownExampleError,
)
from .protocols import ModulationSource
from .sources import (
    AnalogSquareOscillator,
    ComposableSource,
    DigitalSquareOscillator,
    ModulatedSource,
    SinOscillator,
)

__all__ = [
    "ModulationSource",
    "SinOscillator",
    "DigitalSquareOscillator",
    "AnalogSquareOscillator",
    "ModulatedSource",
    "ComposableSource",
    "ModulatorError",
    "InvalidSourceError",
    "PatchError",
    "UnknownExampleError",
]
