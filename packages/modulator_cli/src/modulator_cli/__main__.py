"""Run as: python -m modulator_cli"""

from modulator_cli.main import cli

cli()
