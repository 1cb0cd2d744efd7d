"""
Patch models with Pydantic validation.

A patch describes a source tree declaratively. Each node names a generator
type and may list modulators, which are composed onto it in order:

    source:
      type: sine
      rate: 440
      amplitude: 1.0
      modulators:
        - type: sine
          rate: 6
          amplitude: 5

builds SinOscillator(440, 1.0).compose(SinOscillator(6, 5)).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from modulator_core import (
    AnalogSquareOscillator,
    DigitalSquareOscillator,
    ModulationSource,
    SinOscillator,
)
from modulator_core.constants.analog import DEFAULT_TRANSITION_TIME


class _SourceNode(BaseModel):
    """Fields shared by every generator node."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    rate: float = Field(..., description="Frequency in Hz")
    amplitude: float = Field(..., description="Peak value")
    modulators: list[SourceNode] = Field(
        default_factory=list,
        description="Sources composed onto this one, in order",
    )

    @abstractmethod
    def build_leaf(self) -> ModulationSource:
        """Build the generator for this node, without its modulators."""

    def build(self) -> ModulationSource:
        """Build this node and compose its modulators onto it."""
        source = self.build_leaf()
        for modulator in self.modulators:
            source = source.compose(modulator.build())
        return source


class SineNode(_SourceNode):
    type: Literal["sine"] = "sine"

    def build_leaf(self) -> ModulationSource:
        return SinOscillator(self.rate, self.amplitude)


class DigitalSquareNode(_SourceNode):
    type: Literal["digital_square"] = "digital_square"

    def build_leaf(self) -> ModulationSource:
        return DigitalSquareOscillator(self.rate, self.amplitude)


class AnalogSquareNode(_SourceNode):
    type: Literal["analog_square"] = "analog_square"
    # Out-of-range values are clamped by the oscillator, not rejected here
    rise_time: float = Field(default=DEFAULT_TRANSITION_TIME)
    fall_time: float = Field(default=DEFAULT_TRANSITION_TIME)

    def build_leaf(self) -> ModulationSource:
        return AnalogSquareOscillator(
            self.rate, self.amplitude, self.rise_time, self.fall_time
        )


SourceNode = Annotated[
    Union[SineNode, DigitalSquareNode, AnalogSquareNode],
    Field(discriminator="type"),
]


class Patch(BaseModel):
    """
    A complete patch document.

    duration and sample_rate are optional; callers fall back to their own
    defaults when they are None.

    Example:
        >>> patch = Patch(
        ...     name="LFO",
        ...     source={"type": "sine", "rate": 2.5, "amplitude": 0.5},
        ... )
        >>> patch.build().evaluate(0.1)  # doctest: +SKIP
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    duration: float | None = Field(default=None, ge=0.0, allow_inf_nan=False)
    sample_rate: float | None = Field(default=None, gt=0.0, allow_inf_nan=False)
    source: SourceNode

    def build(self) -> ModulationSource:
        """Build the live source tree."""
        return self.source.build()


for _model in (SineNode, DigitalSquareNode, AnalogSquareNode, Patch):
    _model.model_rebuild()
