"""CLI application for apphosting-link."""

from __future__ import annotations

from pathlib import Path

import typer

from apphosting_link import __version__
from apphosting_link.cli.errors import handle_error
from apphosting_link.cli.options import DEFAULT_CONFIG, GlobalOptions

app = typer.Typer(
    name="apphosting-link",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"apphosting-link {__version__}")
        raise typer.Exit


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help=f"Path to the configuration file (optional; defaults to {DEFAULT_CONFIG}).",
    ),
    project: str | None = typer.Option(None, "--project", "-p", help="Google Cloud project id."),
    location: str | None = typer.Option(
        None, "--location", "-l", help="Backend location, e.g. us-central1."
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase log verbosity (-v info, -vv debug).",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Link Firebase App Hosting backends to GitHub repositories."""
    from apphosting_link.config.loader import ConfigError
    from apphosting_link.config.log import configure_logging

    _ = version
    ctx.obj = GlobalOptions(config=config, project=project, location=location, no_color=no_color)
    try:
        configure_logging(verbose)
    except ConfigError as exc:
        raise typer.Exit(handle_error(exc, color=ctx.obj.color)) from exc


# Register commands after app is created to avoid circular imports.
from apphosting_link.cli import commands as _commands  # noqa: E402, F401
