"""Describe command - show an example's source tree"""

import click

from modulator_core import ModulatedSource, UnknownExampleError
from modulator_cli.catalog import get_example


@click.command()
@click.argument('example_key', metavar='EXAMPLE')
@click.pass_context
def describe(ctx, example_key: str):
    """Show how an example's sources are composed

    Example:
        modulator describe multi-osc
        modulator --json describe multi-osc
    """
    formatter = ctx.obj['formatter']

    try:
        example = get_example(example_key)
    except UnknownExampleError as e:
        formatter.error("Failed to describe example", str(e))
        raise click.Abort()

    source = example.build()
    formatter.source_tree(example.name, source)
    if isinstance(source, ModulatedSource):
        formatter.info(
            f"{sum(1 for _ in source.leaves())} sources, depth {source.depth}"
        )
