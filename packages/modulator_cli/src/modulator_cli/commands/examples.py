"""Examples command - list the example catalog"""

import click

from modulator_cli.catalog import iter_examples


@click.command('list')
@click.pass_context
def list_examples(ctx):
    """List available examples

    Example:
        modulator list
        modulator --json list
    """
    formatter = ctx.obj['formatter']
    formatter.table(
        "Available examples",
        ["Key", "Name", "Description"],
        [(ex.key, ex.name, ex.description) for ex in iter_examples()],
    )
