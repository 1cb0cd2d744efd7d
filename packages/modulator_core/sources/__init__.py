"""Signal generators and the additive combinator."""

from .analog_square import AnalogSquareOscillator, clamp_transition_time
from .base import ComposableSource, ModulatedSource
from .digital_square import DigitalSquareOscillator
from .sine import SinOscillator

__all__ = [
    "AnalogSquareOscillator",
    "ComposableSource",
    "DigitalSquareOscillator",
    "ModulatedSource",
    "SinOscillator",
    "clamp_transition_time",
]
