"""CLI command implementations."""

from __future__ import annotations

import typer

from apphosting_link.cli import app
from apphosting_link.cli.errors import handle_error
from apphosting_link.cli.options import get_options


@app.command()
def link(ctx: typer.Context) -> None:
    """Connect a GitHub repository to App Hosting, creating connections as needed."""
    from apphosting_link import config as config_api
    from apphosting_link.cli.formatting import format_link_result
    from apphosting_link.cli.interaction import TerminalInteraction

    opts = get_options(ctx)
    cfg = opts.load()

    try:
        repo = config_api.link(cfg, TerminalInteraction(color=opts.color))
    except typer.Abort as e:
        typer.echo("Link canceled.", err=True)
        raise typer.Exit(1) from e
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=opts.color)) from exc

    typer.echo(format_link_result(repo, color=opts.color))


@app.command()
def connections(ctx: typer.Context) -> None:
    """List installed App Hosting GitHub connections."""
    from apphosting_link import config as config_api
    from apphosting_link.cli.formatting import format_connections

    opts = get_options(ctx)
    cfg = opts.load()

    try:
        conns = config_api.list_connections(cfg)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=opts.color)) from exc

    typer.echo(format_connections(conns, color=opts.color))


@app.command()
def repos(ctx: typer.Context) -> None:
    """List GitHub repositories that can be linked through existing connections."""
    from apphosting_link import config as config_api
    from apphosting_link.cli.formatting import format_repositories

    opts = get_options(ctx)
    cfg = opts.load()

    try:
        found = config_api.list_repositories(cfg)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=opts.color)) from exc

    typer.echo(format_repositories(found, color=opts.color))
