"""Ideal digital square wave oscillator."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .base import ComposableSource

TWO_PI = 2 * math.pi


@dataclass(frozen=True, slots=True)
class DigitalSquareOscillator(ComposableSource):
    """Bistable square wave with a 50% duty cycle.

    The output is `amplitude` for the first half of each period and exactly
    0 for the second half. Transitions are instantaneous. This models a logic
    level, so the low state is 0 rather than -amplitude.

    Args:
        rate: Frequency in Hz
        amplitude: Level of the high state
    """

    rate: float
    amplitude: float

    def evaluate(self, time: float) -> float:
        # Floored modulo keeps the phase in [0, 2*pi) for negative rate * time
        phase = (TWO_PI * self.rate * time) % TWO_PI
        return self.amplitude if phase < math.pi else 0.0
