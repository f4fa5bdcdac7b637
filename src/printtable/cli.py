"""Command-line interface for printtable."""

from __future__ import annotations

import sys

import click
import yaml

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, LOG_LEVELS, configure_logging
from .exceptions import PrintTableError
from .manifest import TableManifest
from .renderer import TableRenderer

DEMO_TITLE = "My Friends' Gaming GPUs"
DEMO_COLUMNS = ["Vendor", "GPU Name", "Release Year"]
DEMO_ROWS = [
    ["Nvidia", "GTX 980 Ti", "2015"],
    ["Nvidia", "GTX 1070", "2016"],
    ["Nvidia", "GTX 1080", "2016"],
    ["Nvidia", "RTX 2080", "2018"],
]


@click.group()
@click.version_option(package_name="printtable")
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV_VAR,
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help=f"Logging level (env: {LOG_LEVEL_ENV_VAR})",
)
def cli(log_level: str) -> None:
    """printtable: render ASCII tables for the console."""
    configure_logging(log_level)


def _echo_errors(errors: list[PrintTableError]) -> None:
    for error in errors:
        click.echo(f"Warning: {error}", err=True)


@cli.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML table manifest.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 1 if any problem was reported.",
)
def render(file_path: str, strict: bool) -> None:
    """Render a table described by a YAML manifest."""
    with open(file_path) as f:
        try:
            manifest = TableManifest.from_yaml(f.read())
        except (ValueError, yaml.YAMLError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    table = TableRenderer()
    manifest.apply(table)
    render_error = table.render()

    _echo_errors(table.diagnostics)
    if render_error is not None or (strict and table.diagnostics):
        sys.exit(1)


@cli.command()
def demo() -> None:
    """Render a sample table, then reset it and try again."""
    table = TableRenderer()
    table.set_title(DEMO_TITLE)
    for name in DEMO_COLUMNS:
        table.add_column(name)
    table.add_rows(DEMO_ROWS)
    table.render()

    table.reset()
    error = table.render()
    if error is not None:
        _echo_errors([error])


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
