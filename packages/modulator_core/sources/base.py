"""Shared composition behaviour and the additive combinator.

    osc = SinOscillator(440, 1.0)
    vibrato = SinOscillator(6, 0.1)

    voice = osc.compose(vibrato)      # ModulatedSource(osc, vibrato)
    voice = osc + vibrato             # same thing
    voice.evaluate(0.25)              # osc.evaluate(0.25) + vibrato.evaluate(0.25)
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterator

from ..exceptions import InvalidSourceError
from ..protocols import ModulationSource

_COMBINE = object()
_END = object()


def _require_source(value: object, role: str) -> None:
    if value is None:
        raise InvalidSourceError(f"{role} must not be None")
    if not isinstance(value, ModulationSource):
        raise InvalidSourceError(
            f"{role} must be a ModulationSource, got {type(value).__name__}"
        )


class ComposableSource:
    """Mixin giving a source compose() and the + operator."""

    __slots__ = ()

    def compose(self, modulator: ModulationSource) -> ModulatedSource:
        """Add modulator to this source, returning a new ModulatedSource."""
        return ModulatedSource(self, modulator)  # type: ignore[arg-type]

    def __add__(self, modulator: ModulationSource) -> ModulatedSource:
        """Operator overload for compose: source + modulator."""
        return self.compose(modulator)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ModulatedSource(ComposableSource):
    """
    Additive combination of a base source and a modulator.

    The output is the plain sum of both children, with no normalization or
    clipping. Composing a ModulatedSource wraps it as the new base, so
    chained calls build a left-leaning tree:

        a.compose(b).compose(c)
            -> ModulatedSource(ModulatedSource(a, b), c)
            -> (a + b) + c

    Equality, hashing and repr walk the tree without recursion, like
    evaluate(), so they also work on very deep chains.

    Attributes:
        base_source: The carrier signal
        modulator: The signal added to the carrier
    """

    base_source: ModulationSource
    modulator: ModulationSource

    def __post_init__(self) -> None:
        _require_source(self.base_source, "base_source")
        _require_source(self.modulator, "modulator")

    def evaluate(self, time: float) -> float:
        # Walk the base spine without recursion so long chains stay flat,
        # then sum in the same left-to-right order the tree describes.
        modulators: list[ModulationSource] = []
        node: ModulationSource = self
        while isinstance(node, ModulatedSource):
            modulators.append(node.modulator)
            node = node.base_source

        value = node.evaluate(time)
        for modulator in reversed(modulators):
            value += modulator.evaluate(time)
        return value

    # ===== Tree Inspection =====

    def leaves(self) -> Iterator[ModulationSource]:
        """Yield the non-combinator sources of this tree, left to right."""
        stack: list[ModulationSource] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, ModulatedSource):
                stack.append(node.modulator)
                stack.append(node.base_source)
            else:
                yield node

    @property
    def depth(self) -> int:
        """Height of the tree; a single combinator over two leaves is 1."""
        deepest = 0
        stack: list[tuple[ModulationSource, int]] = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if isinstance(node, ModulatedSource):
                stack.append((node.base_source, level + 1))
                stack.append((node.modulator, level + 1))
            else:
                deepest = max(deepest, level)
        return deepest

    # ===== Value Semantics =====

    def _preorder(self) -> Iterator[object]:
        # Combinators appear as a marker before their two children, which
        # fixes the tree shape; leaves appear as themselves.
        stack: list[ModulationSource] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, ModulatedSource):
                yield _COMBINE
                stack.append(node.modulator)
                stack.append(node.base_source)
            else:
                yield node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModulatedSource):
            return NotImplemented
        if self is other:
            return True
        pairs = zip_longest(self._preorder(), other._preorder(), fillvalue=_END)
        for mine, theirs in pairs:
            if mine is _COMBINE or theirs is _COMBINE or mine is _END or theirs is _END:
                if mine is not theirs:
                    return False
            elif mine != theirs:
                return False
        return True

    def __hash__(self) -> int:
        return hash(tuple(self._preorder()))

    def __repr__(self) -> str:
        parts: list[str] = []
        stack: list[tuple[ModulationSource, bool]] = [(self, False)]
        while stack:
            node, children_done = stack.pop()
            if not isinstance(node, ModulatedSource):
                parts.append(repr(node))
            elif children_done:
                modulator = parts.pop()
                base = parts.pop()
                parts.append(f"ModulatedSource(base_source={base}, modulator={modulator})")
            else:
                stack.append((node, True))
                stack.append((node.modulator, False))
                stack.append((node.base_source, False))
        return parts[0]
