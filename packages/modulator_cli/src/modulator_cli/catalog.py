"""Example catalog - named demonstration source trees

Each example builds a fresh source tree and carries the metadata used when
it is sampled and exported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from modulator_core import (
    AnalogSquareOscillator,
    DigitalSquareOscillator,
    ModulationSource,
    SinOscillator,
    UnknownExampleError,
)

DEFAULT_EXAMPLE_DURATION = 1.0


@dataclass(frozen=True, slots=True)
class Example:
    """A named, buildable source tree.

    Args:
        key: Command-line name (e.g. "basic-sine")
        name: Display name written to exports
        description: One-line description written to exports
        duration: Suggested sampling duration in seconds
        factory: Builds the source tree
    """

    key: str
    name: str
    description: str
    duration: float
    factory: Callable[[], ModulationSource]

    def build(self) -> ModulationSource:
        return self.factory()


EXAMPLES: dict[str, Example] = {}


def example(
    key: str,
    name: str,
    description: str,
    duration: float = DEFAULT_EXAMPLE_DURATION,
) -> Callable[[Callable[[], ModulationSource]], Callable[[], ModulationSource]]:
    """Register a source factory under key"""

    def register(factory: Callable[[], ModulationSource]) -> Callable[[], ModulationSource]:
        EXAMPLES[key] = Example(key, name, description, duration, factory)
        return factory

    return register


def get_example(key: str) -> Example:
    """Look up an example by key (case-insensitive)

    Raises:
        UnknownExampleError: If no example is registered under key
    """
    try:
        return EXAMPLES[key.lower()]
    except KeyError:
        raise UnknownExampleError(f"Unknown example: {key}") from None


def iter_examples() -> Iterator[Example]:
    """Examples in registration order"""
    return iter(EXAMPLES.values())


# =============================================================================
# Basic oscillators
# =============================================================================


@example("basic-sine", "Basic Sine Wave", "A simple 440Hz sine wave with amplitude 1.0")
def basic_sine() -> ModulationSource:
    return SinOscillator(440, 1.0)


@example(
    "lfo",
    "Low Frequency Oscillator",
    "A 2.5Hz LFO with 50% amplitude for modulation purposes",
    duration=2.0,
)
def lfo() -> ModulationSource:
    return SinOscillator(2.5, 0.5)


@example(
    "digital-square",
    "Digital Square Wave",
    "A clean 100Hz digital square wave with instantaneous transitions",
    duration=0.1,
)
def digital_square() -> ModulationSource:
    return DigitalSquareOscillator(100, 1.0)


@example("clock-signal", "Clock Signal", "A 10Hz clock signal at 3.3V logic level")
def clock_signal() -> ModulationSource:
    return DigitalSquareOscillator(10, 3.3)


@example(
    "analog-square",
    "Analog Square Wave",
    "A 100Hz analog square wave with realistic transitions and characteristics",
    duration=0.1,
)
def analog_square() -> ModulationSource:
    return AnalogSquareOscillator(100, 1.0)


@example(
    "custom-analog",
    "Custom Analog Square",
    "A 50Hz analog square wave with custom rise (5%) and fall (8%) times",
    duration=0.2,
)
def custom_analog() -> ModulationSource:
    return AnalogSquareOscillator(50, 1.0, rise_time=0.05, fall_time=0.08)


@example(
    "audio-square",
    "Audio Square with Vibrato",
    "A 220Hz analog square wave with 5Hz vibrato for audio synthesis",
    duration=2.0,
)
def audio_square() -> ModulationSource:
    square = AnalogSquareOscillator(220, 0.8, rise_time=0.02, fall_time=0.03)
    return square.compose(SinOscillator(5, 0.05))


# =============================================================================
# Modulation
# =============================================================================


@example(
    "simple-modulation",
    "Simple Modulation",
    "440Hz sine wave modulated by 5Hz oscillator",
    duration=2.0,
)
def simple_modulation() -> ModulationSource:
    return SinOscillator(440, 1.0).compose(SinOscillator(5, 0.2))


@example("vibrato", "Vibrato Effect", "440Hz note with 6Hz vibrato effect", duration=2.0)
def vibrato() -> ModulationSource:
    return SinOscillator(440, 1.0).compose(SinOscillator(6, 5))


@example(
    "tremolo",
    "Tremolo Effect",
    "440Hz sine wave with 8Hz tremolo (amplitude modulation)",
    duration=2.0,
)
def tremolo() -> ModulationSource:
    return SinOscillator(440, 1.0).compose(SinOscillator(8, 0.3))


@example(
    "complex-mod",
    "Complex Soundscape",
    "110Hz base with multiple modulation layers creating evolving texture",
    duration=4.0,
)
def complex_soundscape() -> ModulationSource:
    slow_deep = SinOscillator(0.5, 10)
    fast_light = SinOscillator(7, 2)
    return SinOscillator(110, 1.0).compose(slow_deep).compose(fast_light)


@example(
    "chained-mod",
    "Chained Modulators",
    "440Hz sine with chained modulation (base + mod1 + mod2)",
    duration=4.0,
)
def chained_modulators() -> ModulationSource:
    return (
        SinOscillator(440, 1.0)
        .compose(SinOscillator(5, 0.1))
        .compose(SinOscillator(0.5, 2))
    )


@example(
    "modulation-networks",
    "Modulation Networks",
    "Complex vibrato with varying depth applied to 440Hz carrier",
    duration=4.0,
)
def modulation_networks() -> ModulationSource:
    # The modulator is itself a modulated source
    vibrato = SinOscillator(6, 1.0).compose(SinOscillator(0.2, 0.05))
    return SinOscillator(440, 1.0).compose(vibrato)


# =============================================================================
# Radio and control signals
# =============================================================================


@example(
    "am-radio",
    "AM Radio Simulation",
    "1000Hz RF carrier modulated by 100Hz audio signal",
    duration=0.1,
)
def am_radio() -> ModulationSource:
    # Additive stand-in: true AM would multiply carrier and audio
    return SinOscillator(1000, 1.0).compose(SinOscillator(100, 0.5))


@example(
    "control-signals",
    "Control Signals",
    "100Hz signal with 0.5Hz sweep modulation (±50Hz)",
    duration=4.0,
)
def control_signals() -> ModulationSource:
    return SinOscillator(100, 1.0).compose(SinOscillator(0.5, 50))


@example(
    "signal-analysis",
    "Signal Analysis",
    "500Hz test signal with 25Hz modulation for analysis purposes",
    duration=0.2,
)
def signal_analysis() -> ModulationSource:
    return SinOscillator(500, 1.0).compose(SinOscillator(25, 0.2))


# =============================================================================
# Synthesizer voices
# =============================================================================


@example(
    "simple-voice",
    "Simple Synthesizer Voice",
    "440Hz voice with vibrato (5Hz, 1%) and tremolo (3Hz, 10%)",
    duration=3.0,
)
def simple_voice() -> ModulationSource:
    vibrato = SinOscillator(5, 440 * 0.01)
    tremolo = SinOscillator(3, 0.1)
    return SinOscillator(440, 0.8).compose(vibrato).compose(tremolo)


@example(
    "multi-osc",
    "Multi-Oscillator Synthesizer",
    "Combined sine, digital square, analog square oscillators with sub-oscillator",
    duration=2.0,
)
def multi_oscillator() -> ModulationSource:
    sub = AnalogSquareOscillator(110, 0.2)  # one octave down
    return (
        SinOscillator(220, 0.3)
        .compose(DigitalSquareOscillator(220, 0.4))
        .compose(AnalogSquareOscillator(220, 0.3, rise_time=0.03, fall_time=0.04))
        .compose(sub)
    )


@example(
    "drum-kick",
    "Drum Kick Synthesis",
    "Synthesized kick drum using analog square body with digital click",
)
def drum_kick() -> ModulationSource:
    body = AnalogSquareOscillator(60, 1.0, rise_time=0.1, fall_time=0.2)
    click = DigitalSquareOscillator(240, 0.3)
    pitch_sweep = SinOscillator(2, 30)
    return body.compose(click).compose(pitch_sweep)


@example(
    "drum-snare",
    "Drum Snare Synthesis",
    "Synthesized snare drum with digital tone and analog noise",
    duration=0.5,
)
def drum_snare() -> ModulationSource:
    tone = DigitalSquareOscillator(200, 0.6)
    rattle = AnalogSquareOscillator(1400, 0.4, rise_time=0.005, fall_time=0.005)
    return tone.compose(rattle)


# =============================================================================
# Test signals
# =============================================================================

SWEEP_START_HZ = 100.0
SWEEP_END_HZ = 400.0
SWEEP_DURATION = 2.0


@example(
    "test-sweep",
    "Test Signal Sweep",
    f"Frequency sweep from {SWEEP_START_HZ:g}Hz to {SWEEP_END_HZ:g}Hz "
    f"over {SWEEP_DURATION:g}s",
    duration=SWEEP_DURATION,
)
def sweep_signal() -> ModulationSource:
    sweep_rate = (SWEEP_END_HZ - SWEEP_START_HZ) / SWEEP_DURATION
    return SinOscillator(SWEEP_START_HZ, 1.0).compose(
        SinOscillator(1.0 / SWEEP_DURATION, sweep_rate)
    )


@example(
    "test-square",
    "Square Wave Comparison",
    "Digital vs analog square wave comparison with slow crossfade",
    duration=4.0,
)
def square_comparison() -> ModulationSource:
    return (
        DigitalSquareOscillator(100, 0.5)
        .compose(AnalogSquareOscillator(100, 0.5))
        .compose(SinOscillator(0.25, 0.25))
    )
