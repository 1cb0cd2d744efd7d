"""Run command - sample a catalog example"""

import logging

import click
from pydantic import ValidationError

from modulator_core import ModulationSource, ModulatorError
from modulator_io import generate_waveform_data, save_waveform_data
from modulator_cli.catalog import get_example

logger = logging.getLogger(__name__)


def emit_waveform(
    ctx,
    source: ModulationSource,
    name: str,
    description: str,
    duration: float,
    sample_rate: float,
    output_path: str | None,
) -> None:
    """Sample a source, then save it or print a preview"""
    settings = ctx.obj['settings']
    formatter = ctx.obj['formatter']

    data = generate_waveform_data(source, name, description, duration, sample_rate)

    saved_to = None
    if output_path is not None:
        saved_to = str(save_waveform_data(data, settings.resolve_output(output_path)))

    formatter.waveform(data, preview=settings.preview_samples, saved_to=saved_to)


@click.command()
@click.argument('example_key', metavar='EXAMPLE')
@click.argument('output_path', required=False)
@click.option('--duration', type=float, default=None,
              help="Seconds to sample (default: the example's own duration)")
@click.option('--sample-rate', type=float, default=None,
              help='Samples per second (default: MODULATOR_DEFAULT_SAMPLE_RATE)')
@click.pass_context
def run(ctx, example_key: str, output_path: str | None,
        duration: float | None, sample_rate: float | None):
    """Generate waveform data for a catalog example

    If OUTPUT_PATH is given the samples are saved there as JSON,
    otherwise the first few samples are printed.

    Example:
        modulator run basic-sine
        modulator run vibrato vibrato.json
        modulator run drum-kick --duration 0.5 --sample-rate 8000
    """
    formatter = ctx.obj['formatter']
    settings = ctx.obj['settings']

    try:
        example = get_example(example_key)
        logger.debug(f"Running example '{example.key}'")
        emit_waveform(
            ctx,
            example.build(),
            example.name,
            example.description,
            duration if duration is not None else example.duration,
            sample_rate if sample_rate is not None else settings.default_sample_rate,
            output_path,
        )

    except (ModulatorError, ValidationError, OSError) as e:
        formatter.error(f"Failed to run example '{example_key}'", str(e))
        raise click.Abort()
