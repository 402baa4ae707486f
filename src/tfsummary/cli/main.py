"""Main CLI entry point for tfsummary."""

import logging
import click
from .commands.summarize import summarize
from .commands.validate import validate
from .commands.action import action
from .commands.version import version
from ..utils.logging import set_log_level
from .. import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tfsummary", message="%(prog)s version %(version)s")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """tfsummary - Human-readable Terraform plan summaries."""
    if verbose:
        set_log_level(logging.DEBUG)


cli.add_command(summarize)
cli.add_command(validate)
cli.add_command(action)
cli.add_command(version)
