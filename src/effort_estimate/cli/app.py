"""Typer application entrypoint."""

import logging
from typing import Optional

import typer

from effort_estimate.cli.commands.catalog import run as run_catalog
from effort_estimate.cli.commands.estimate import run as run_estimate
from effort_estimate.version import __version__

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Size coding tasks by lines of code, adjust for risk, and flag tasks that need splitting.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"effort-estimate {__version__}")
        raise typer.Exit()


@app.callback()
def _global_options(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
    version: Optional[bool] = typer.Option(  # noqa: ARG001
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Global options for effort-estimate."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s", force=True)


app.command("estimate")(run_estimate)
app.command("catalog")(run_catalog)


def main() -> None:
    """Run the CLI app."""
    app()


if __name__ == "__main__":
    main()
