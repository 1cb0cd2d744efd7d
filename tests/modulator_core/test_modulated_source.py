"""
Tests for ModulatedSource
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError

import pytest
from modulator_core import (
    AnalogSquareOscillator,
    DigitalSquareOscillator,
    InvalidSourceError,
    ModulatedSource,
    ModulationSource,
    ModulatorError,
    SinOscillator,
)


class ConstantSource:
    """Duck-typed source that satisfies the protocol without the mixin"""

    def __init__(self, value: float):
        self.value = value

    def evaluate(self, time: float) -> float:
        return self.value

    def compose(self, modulator):
        return ModulatedSource(self, modulator)


class TestModulatedSourceConstruction:
    """Test child validation"""

    def test_stores_children(self):
        base = SinOscillator(440.0, 1.0)
        modulator = SinOscillator(5.0, 0.2)

        modulated = ModulatedSource(base, modulator)

        assert modulated.base_source is base
        assert modulated.modulator is modulator

    def test_none_base_raises(self):
        with pytest.raises(InvalidSourceError, match="base_source"):
            ModulatedSource(None, SinOscillator(1.0, 1.0))

    def test_none_modulator_raises(self):
        with pytest.raises(InvalidSourceError, match="modulator"):
            ModulatedSource(SinOscillator(1.0, 1.0), None)

    def test_compose_none_raises(self):
        with pytest.raises(InvalidSourceError):
            SinOscillator(1.0, 1.0).compose(None)

    def test_invalid_source_error_is_value_error(self):
        with pytest.raises(ValueError):
            DigitalSquareOscillator(1.0, 1.0).compose(None)
        assert issubclass(InvalidSourceError, ModulatorError)

    def test_non_source_raises(self):
        with pytest.raises(InvalidSourceError, match="float"):
            SinOscillator(1.0, 1.0).compose(0.5)

    def test_accepts_duck_typed_source(self):
        modulated = SinOscillator(1.0, 1.0).compose(ConstantSource(0.25))
        assert modulated.evaluate(0.25) == pytest.approx(1.25)

    def test_is_modulation_source(self):
        modulated = SinOscillator(1.0, 1.0).compose(SinOscillator(2.0, 1.0))
        assert isinstance(modulated, ModulationSource)

    def test_is_frozen(self):
        modulated = SinOscillator(1.0, 1.0).compose(SinOscillator(2.0, 1.0))
        with pytest.raises(FrozenInstanceError):
            modulated.modulator = SinOscillator(3.0, 1.0)


class TestModulatedSourceEvaluate:
    """Test additive superposition"""

    @pytest.mark.parametrize("time", [-2.5, -0.013, 0.0, 0.1, 0.2, 0.77, 3.14159])
    def test_two_sources_sum_exactly(self, time):
        a = AnalogSquareOscillator(3.0, 1.2, 0.05, 0.1)
        b = SinOscillator(7.0, 0.4)
        assert a.compose(b).evaluate(time) == a.evaluate(time) + b.evaluate(time)

    @pytest.mark.parametrize("time", [-1.0, 0.0, 0.05, 0.3, 0.9])
    def test_three_sources_sum(self, time):
        a = SinOscillator(2.0, 1.0)
        b = DigitalSquareOscillator(5.0, 0.5)
        c = AnalogSquareOscillator(1.0, 2.0)

        chained = a.compose(b).compose(c)

        expected = a.evaluate(time) + b.evaluate(time) + c.evaluate(time)
        assert chained.evaluate(time) == expected

    def test_no_clipping(self):
        a = DigitalSquareOscillator(1.0, 3.0)
        b = DigitalSquareOscillator(1.0, 4.0)
        assert a.compose(b).evaluate(0.1) == 7.0

    def test_zero_amplitude_modulator_leaves_base(self):
        base = AnalogSquareOscillator(2.0, 1.5)
        modulated = base.compose(SinOscillator(13.0, 0.0))
        for i in range(50):
            t = i * 0.021
            assert modulated.evaluate(t) == base.evaluate(t)

    def test_composition_order_does_not_change_value(self):
        a = SinOscillator(3.0, 1.0)
        b = DigitalSquareOscillator(2.0, 0.7)
        c = AnalogSquareOscillator(1.0, 0.3)

        forward = a.compose(b).compose(c)
        backward = c.compose(b).compose(a)

        for t in (0.05, 0.4, 0.85):
            assert forward.evaluate(t) == pytest.approx(backward.evaluate(t), abs=1e-12)

    def test_modulator_may_be_modulated(self):
        vibrato = SinOscillator(6.0, 1.0).compose(SinOscillator(0.2, 0.05))
        carrier = SinOscillator(440.0, 1.0)
        network = carrier.compose(vibrato)

        t = 0.123
        assert network.evaluate(t) == pytest.approx(carrier.evaluate(t) + vibrato.evaluate(t))

    def test_deep_chain_does_not_recurse(self):
        source = DigitalSquareOscillator(1.0, 1.0)
        for _ in range(5000):
            source = source.compose(DigitalSquareOscillator(1.0, 1.0))

        assert source.evaluate(0.25) == 5001.0
        assert source.evaluate(0.75) == 0.0

    def test_concurrent_evaluation(self):
        tree = (
            SinOscillator(440.0, 0.8)
            .compose(DigitalSquareOscillator(220.0, 0.4))
            .compose(AnalogSquareOscillator(110.0, 0.2))
        )
        times = [i / 1000.0 for i in range(2000)]

        expected = [tree.evaluate(t) for t in times]
        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(tree.evaluate, times))

        assert actual == expected


class TestModulatedSourceCompose:
    """Test chaining and tree shape"""

    def test_compose_wraps_self_as_base(self):
        a = SinOscillator(1.0, 1.0)
        b = SinOscillator(2.0, 1.0)
        c = SinOscillator(3.0, 1.0)

        ab = a.compose(b)
        abc = ab.compose(c)

        assert abc.base_source is ab
        assert abc.modulator is c
        # Original nodes are untouched
        assert ab.base_source is a
        assert ab.modulator is b

    def test_plus_operator_chains(self):
        a = SinOscillator(1.0, 1.0)
        b = SinOscillator(2.0, 1.0)
        c = SinOscillator(3.0, 1.0)
        assert a + b + c == a.compose(b).compose(c)

    def test_leaves_left_to_right(self):
        a = SinOscillator(1.0, 1.0)
        b = DigitalSquareOscillator(2.0, 1.0)
        c = AnalogSquareOscillator(3.0, 1.0)
        d = SinOscillator(4.0, 1.0)

        tree = a.compose(b).compose(c.compose(d))

        assert list(tree.leaves()) == [a, b, c, d]

    def test_depth(self):
        a = SinOscillator(1.0, 1.0)
        b = SinOscillator(2.0, 1.0)
        c = SinOscillator(3.0, 1.0)

        assert a.compose(b).depth == 1
        assert a.compose(b).compose(c).depth == 2
        assert a.compose(b.compose(c)).depth == 2


def _chain(length: int) -> ModulatedSource:
    source = SinOscillator(1.0, 1.0)
    for i in range(length):
        source = source.compose(DigitalSquareOscillator(float(i % 7), 0.5))
    return source


class TestModulatedSourceValueSemantics:
    """Test equality, hashing and repr"""

    def test_equal_trees(self):
        a = SinOscillator(1.0, 1.0)
        b = SinOscillator(2.0, 1.0)
        assert a.compose(b) == ModulatedSource(SinOscillator(1.0, 1.0), SinOscillator(2.0, 1.0))
        assert hash(a.compose(b)) == hash(a.compose(b))

    def test_same_leaves_different_shape(self):
        a = SinOscillator(1.0, 1.0)
        b = SinOscillator(2.0, 1.0)
        c = SinOscillator(3.0, 1.0)

        left = a.compose(b).compose(c)
        right = a.compose(b.compose(c))

        assert left != right
        assert list(left.leaves()) == list(right.leaves())

    def test_different_leaves(self):
        a = SinOscillator(1.0, 1.0)
        assert a.compose(SinOscillator(2.0, 1.0)) != a.compose(SinOscillator(2.0, 0.5))
        assert a.compose(a) != a

    def test_usable_as_dict_key(self):
        tree = SinOscillator(1.0, 1.0).compose(SinOscillator(2.0, 1.0))
        lookup = {tree: "voice"}
        assert lookup[SinOscillator(1.0, 1.0) + SinOscillator(2.0, 1.0)] == "voice"

    def test_repr(self):
        tree = SinOscillator(1.0, 1.0).compose(SinOscillator(2.0, 0.5))
        assert repr(tree) == (
            "ModulatedSource(base_source=SinOscillator(rate=1.0, amplitude=1.0), "
            "modulator=SinOscillator(rate=2.0, amplitude=0.5))"
        )

    def test_deep_chain_equality_and_hash(self):
        first = _chain(5000)
        second = _chain(5000)

        assert first == second
        assert hash(first) == hash(second)
        assert first != _chain(4999)
        assert repr(first).count("ModulatedSource(") == 5000
