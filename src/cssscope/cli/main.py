"""cssscope CLI entry point: Click group with subcommands."""

import logging

import click

from cssscope import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssscope")
@click.option("-v", "--verbose", is_flag=True, help="Log each rewritten scope block")
def cli(verbose: bool) -> None:
    """cssscope - scope the rules of marked CSS regions to a component class."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from cssscope.cli.rewrite import rewrite  # noqa: E402
from cssscope.cli.validate import validate  # noqa: E402

cli.add_command(rewrite)
cli.add_command(validate)
