"""Analog square wave oscillator.

Models the non-ideal response of a real square wave circuit instead of a
perfect bistable switch. Each period is split into four phase regions:

    0          rise_time        0.5        0.5 + fall_time          1
    |-- rise --|------ high -----|-- fall --|---------- low ---------|

- rise: exponential RC charge toward 1 with a damped overshoot (capped at 1.1)
- high: plateau with a small ripple decaying from the end of the rise
- fall: exponential RC discharge toward 0 with a damped undershoot
  (floored at -0.05)
- low: near-zero settling ripple decaying from the end of the fall

Every region is scaled by the signed amplitude.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants.analog import (
    CHARGE_RATE,
    DEFAULT_TRANSITION_TIME,
    FALL_START,
    HIGH_RIPPLE_DECAY,
    HIGH_RIPPLE_FREQUENCY,
    HIGH_RIPPLE_MAGNITUDE,
    LOW_RIPPLE_DECAY,
    LOW_RIPPLE_FREQUENCY,
    LOW_RIPPLE_MAGNITUDE,
    MAX_TRANSITION_TIME,
    MIN_TRANSITION_TIME,
    OVERSHOOT_CAP,
    OVERSHOOT_DECAY,
    OVERSHOOT_MAGNITUDE,
    UNDERSHOOT_DECAY,
    UNDERSHOOT_FLOOR,
    UNDERSHOOT_MAGNITUDE,
)
from .base import ComposableSource


def clamp_transition_time(value: float) -> float:
    """Clamp a rise/fall time into [MIN_TRANSITION_TIME, MAX_TRANSITION_TIME]."""
    return max(MIN_TRANSITION_TIME, min(MAX_TRANSITION_TIME, value))


@dataclass(frozen=True, slots=True)
class AnalogSquareOscillator(ComposableSource):
    """
    Square wave with modeled rise/fall transients and ringing.

    Out-of-range rise and fall times are clamped silently rather than
    rejected, so the stored values always lie in [0.001, 0.4].

    Args:
        rate: Frequency in Hz
        amplitude: Level of the high state
        rise_time: Rising edge duration as a fraction of one period
        fall_time: Falling edge duration as a fraction of one period
    """

    rate: float
    amplitude: float
    rise_time: float = DEFAULT_TRANSITION_TIME
    fall_time: float = DEFAULT_TRANSITION_TIME

    def __post_init__(self) -> None:
        object.__setattr__(self, "rise_time", clamp_transition_time(self.rise_time))
        object.__setattr__(self, "fall_time", clamp_transition_time(self.fall_time))

    def phase_at(self, time: float) -> float:
        """Position within the current period, normalized to [0, 1)."""
        if self.rate == 0:
            # Infinite period: every finite time sits at the start of a cycle
            return 0.0

        period = 1.0 / self.rate
        if not math.isfinite(period):
            # Subnormal rates overflow the period
            return 0.0
        phase = (time % period) / period
        if phase < 0.0:
            phase += 1.0
        if phase >= 1.0:
            phase -= 1.0
        return phase

    def evaluate(self, time: float) -> float:
        x = self.phase_at(time)
        rise_end = self.rise_time
        fall_end = FALL_START + self.fall_time

        if x < rise_end:
            progress = x / rise_end
            charge = 1.0 - math.exp(-CHARGE_RATE * progress)
            overshoot = (
                OVERSHOOT_MAGNITUDE
                * math.sin(math.pi * progress)
                * math.exp(-OVERSHOOT_DECAY * progress)
            )
            return self.amplitude * min(OVERSHOOT_CAP, charge + overshoot)

        if x < FALL_START:
            ripple = (
                HIGH_RIPPLE_MAGNITUDE
                * math.sin(x * HIGH_RIPPLE_FREQUENCY * math.pi)
                * math.exp(-HIGH_RIPPLE_DECAY * (x - rise_end))
            )
            return self.amplitude * (1.0 + ripple)

        if x < fall_end:
            progress = (x - FALL_START) / (fall_end - FALL_START)
            discharge = math.exp(-CHARGE_RATE * progress)
            undershoot = (
                -UNDERSHOOT_MAGNITUDE
                * math.sin(math.pi * progress)
                * math.exp(-UNDERSHOOT_DECAY * progress)
            )
            return self.amplitude * max(UNDERSHOOT_FLOOR, discharge + undershoot)

        if x == fall_end:
            return self.amplitude * 0.0
        ripple = (
            LOW_RIPPLE_MAGNITUDE
            * math.exp(-LOW_RIPPLE_DECAY * (x - fall_end))
            * math.sin(x * LOW_RIPPLE_FREQUENCY * math.pi)
        )
        return self.amplitude * ripple
