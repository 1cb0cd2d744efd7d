"""Render command - sample a patch file"""

import click
from pydantic import ValidationError

from modulator_core import ModulatorError
from modulator_io import load_patch_from_file
from modulator_cli.commands.run import emit_waveform


@click.command()
@click.argument('patch_path', metavar='PATCH', type=click.Path(exists=True, dir_okay=False))
@click.argument('output_path', required=False)
@click.option('--duration', type=float, default=None,
              help="Seconds to sample (overrides the patch)")
@click.option('--sample-rate', type=float, default=None,
              help='Samples per second (overrides the patch)')
@click.pass_context
def render(ctx, patch_path: str, output_path: str | None,
           duration: float | None, sample_rate: float | None):
    """Generate waveform data for a YAML or JSON patch file

    Example:
        modulator render patches/vibrato.yaml
        modulator render patches/vibrato.yaml vibrato.json --duration 4
    """
    formatter = ctx.obj['formatter']
    settings = ctx.obj['settings']

    try:
        patch = load_patch_from_file(patch_path)

        if duration is None:
            duration = patch.duration if patch.duration is not None else settings.default_duration
        if sample_rate is None:
            sample_rate = (
                patch.sample_rate if patch.sample_rate is not None
                else settings.default_sample_rate
            )

        emit_waveform(
            ctx,
            patch.build(),
            patch.name,
            patch.description,
            duration,
            sample_rate,
            output_path,
        )

    except (ModulatorError, ValidationError, OSError) as e:
        formatter.error(f"Failed to render patch '{patch_path}'", str(e))
        raise click.Abort()
