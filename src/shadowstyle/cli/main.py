"""Shadowstyle CLI entry point: Click group with subcommands."""

import logging

import click

from shadowstyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="shadowstyle")
@click.option("-v", "--verbose", is_flag=True, help="Log every selector rewrite.")
def cli(verbose: bool) -> None:
    """Shadowstyle - rewrite global component CSS for shadow DOM."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from shadowstyle.cli.selector import selector  # noqa: E402
from shadowstyle.cli.stylesheet import stylesheet  # noqa: E402

cli.add_command(selector)
cli.add_command(stylesheet)
