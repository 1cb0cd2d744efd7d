"""Sine wave oscillator."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .base import ComposableSource


@dataclass(frozen=True, slots=True)
class SinOscillator(ComposableSource):
    """Pure sine generator: amplitude * sin(2*pi*rate*t).

    Args:
        rate: Frequency in Hz (any finite value, including zero or negative)
        amplitude: Peak value; a negative amplitude flips the phase 180 degrees
    """

    rate: float
    amplitude: float

    def evaluate(self, time: float) -> float:
        return self.amplitude * math.sin(2 * math.pi * self.rate * time)
