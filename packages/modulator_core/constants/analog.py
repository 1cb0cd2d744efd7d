"""Analog square wave shaping constants.

Every value here is part of the generator's observable output and is fixed.
"""

from typing import Final

# Rise/fall time bounds, as a fraction of one period
MIN_TRANSITION_TIME: Final[float] = 0.001
MAX_TRANSITION_TIME: Final[float] = 0.4
DEFAULT_TRANSITION_TIME: Final[float] = 0.01

# Phase where the falling edge begins (50% duty cycle)
FALL_START: Final[float] = 0.5

# Rising edge: RC charge curve with damped overshoot
CHARGE_RATE: Final[float] = 5.0
OVERSHOOT_MAGNITUDE: Final[float] = 0.05
OVERSHOOT_DECAY: Final[float] = 3.0
OVERSHOOT_CAP: Final[float] = 1.1

# High plateau ripple
HIGH_RIPPLE_MAGNITUDE: Final[float] = 0.01
HIGH_RIPPLE_FREQUENCY: Final[float] = 50.0  # sin(50*pi*x)
HIGH_RIPPLE_DECAY: Final[float] = 10.0

# Falling edge: RC discharge curve with damped undershoot
UNDERSHOOT_MAGNITUDE: Final[float] = 0.03
UNDERSHOOT_DECAY: Final[float] = 3.0
UNDERSHOOT_FLOOR: Final[float] = -0.05

# Low plateau settling ripple
LOW_RIPPLE_MAGNITUDE: Final[float] = 0.005
LOW_RIPPLE_FREQUENCY: Final[float] = 30.0  # sin(30*pi*x)
LOW_RIPPLE_DECAY: Final[float] = 20.0
