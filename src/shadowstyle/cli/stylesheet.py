"""CLI command: shadowstyle stylesheet -- rewrite a component stylesheet."""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import click

from shadowstyle.config import (
    ConfigError,
    ShadowStyleConfig,
    find_component,
    load_config,
)
from shadowstyle.model.component import Component
from shadowstyle.parser import ParseError
from shadowstyle.stylesheet import process_stylesheet

_DEFAULTS = ShadowStyleConfig()


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON conversion config.",
)
@click.option(
    "--component",
    "component_names",
    multiple=True,
    help="Component to process (repeatable). Defaults to every component.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Write one file per component here instead of printing.",
)
@click.option(
    "--prefix",
    default=_DEFAULTS.output_prefix,
    show_default=True,
    help="Output file name prefix.",
)
@click.option(
    "--suffix",
    default=_DEFAULTS.output_suffix,
    show_default=True,
    help="Output file name suffix.",
)
@click.option(
    "--jobs",
    type=click.IntRange(min=1),
    default=None,
    help="Worker threads. Defaults to the executor's choice.",
)
@click.option(
    "--encoding",
    default=_DEFAULTS.encoding,
    show_default=True,
    help="Encoding of input and output files.",
)
def stylesheet(
    cssfile: str,
    config_path: str,
    component_names: tuple[str, ...],
    output_dir: str | None,
    prefix: str,
    suffix: str,
    jobs: int | None,
    encoding: str,
) -> None:
    """Rewrite CSSFILE for the shadow root of each configured component."""
    settings = ShadowStyleConfig(
        output_prefix=prefix,
        output_suffix=suffix,
        max_workers=jobs,
        encoding=encoding,
    )
    try:
        configs = load_config(config_path)
        if component_names:
            components = [find_component(configs, name) for name in component_names]
        else:
            components = [c for config in configs for c in config.components]
        css = Path(cssfile).read_text(encoding=settings.encoding)

        # Components only share the read-only config, so they run in parallel.
        with ThreadPoolExecutor(max_workers=settings.max_workers) as pool:
            results = list(pool.map(lambda c: process_stylesheet(css, c), components))
    except (ConfigError, ParseError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except (OSError, LookupError, UnicodeDecodeError) as exc:
        click.echo(f"Error: cannot read {cssfile}: {exc}", err=True)
        sys.exit(1)

    if not components:
        click.echo("Error: no components configured", err=True)
        sys.exit(1)

    if output_dir is None:
        for output in results:
            click.echo(output, nl=False)
        return

    out = Path(output_dir)
    try:
        out.mkdir(parents=True, exist_ok=True)
        for component, output in zip(components, results):
            path = out / _output_name(component, settings)
            path.write_text(output, encoding=settings.encoding)
            click.echo(f"Wrote {path}")
    except (OSError, UnicodeEncodeError) as exc:
        click.echo(f"Error: cannot write output: {exc}", err=True)
        sys.exit(1)


def _output_name(component: Component, settings: ShadowStyleConfig) -> str:
    return f"{settings.output_prefix}{component.name}{settings.output_suffix}"
