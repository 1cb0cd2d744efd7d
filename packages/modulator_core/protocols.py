"""
Modulation source protocol.

Every generator and combinator in Modulator satisfies this interface.
Implementations are immutable: evaluating a source never changes it, and
composing two sources always returns a new node.

Usage:
    class ConstantSource:
        def evaluate(self, time: float) -> float:
            return 0.5

        def compose(self, modulator: ModulationSource) -> ModulationSource:
            return ModulatedSource(self, modulator)

    # Type checking ensures compatibility
    source: ModulationSource = ConstantSource()
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ModulationSource(Protocol):
    """
    Protocol for anything that produces a value at a point in time.

    Implementations:
        - SinOscillator, DigitalSquareOscillator, AnalogSquareOscillator
        - ModulatedSource: additive combination of two sources
    """

    def evaluate(self, time: float) -> float:
        """
        Value of the signal at the given time.

        Must be deterministic and defined for every finite time,
        including negative time.

        Args:
            time: Time in seconds

        Returns:
            Signal value
        """
        ...

    def compose(self, modulator: ModulationSource) -> ModulationSource:
        """
        Combine this source with a modulator by addition.

        Args:
            modulator: Source whose output is added to this one

        Returns:
            New source; neither operand is modified

        Raises:
            InvalidSourceError: If modulator is None
        """
        ...
