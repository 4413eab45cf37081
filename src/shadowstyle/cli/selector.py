"""CLI command: shadowstyle selector -- rewrite a single selector."""

from __future__ import annotations

import sys

import click

from shadowstyle.config import ConfigError, find_component, load_config
from shadowstyle.parser import ParseError
from shadowstyle.transforms import transform_selector


@click.command()
@click.argument("source")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON conversion config.",
)
@click.option("--component", "component_name", required=True, help="Component name.")
def selector(source: str, config_path: str, component_name: str) -> None:
    """Rewrite SOURCE for the shadow root of a component and print it."""
    try:
        component = find_component(load_config(config_path), component_name)
        click.echo(transform_selector(source, component))
    except (ConfigError, ParseError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
