"""Plain-text rendering for CLI output."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from apphosting_link.core.names import extract_repo_slug, parse_connection_name

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from apphosting_link.engine.discovery import DiscoveredRepositories
    from apphosting_link.resources.connection import Connection
    from apphosting_link.resources.repository import GitRepositoryLink


def styler(color: bool) -> Callable[..., str]:
    """Return ``typer.style`` when *color* is True, otherwise a passthrough."""
    if color:
        return typer.style
    return lambda text, **_kw: text


def _align(rows: Sequence[tuple[str, ...]]) -> list[str]:
    """Left-align columns separated by two spaces."""
    if not rows:
        return []
    widths = [max(len(r[i]) for r in rows) for i in range(len(rows[0]))]
    return ["  ".join(c.ljust(w) for c, w in zip(r, widths, strict=True)).rstrip() for r in rows]


def format_connections(connections: Sequence[Connection], *, color: bool = True) -> str:
    """One line per connection: id, location, installation stage."""
    if not connections:
        return "No App Hosting GitHub connections found."
    s = styler(color)
    rows: list[tuple[str, ...]] = [("CONNECTION", "LOCATION", "STAGE")]
    for conn in connections:
        parts = parse_connection_name(conn.name)
        conn_id, location = (parts.id, parts.location) if parts else (conn.name, "?")
        rows.append((conn_id, location, conn.installation_state.stage))
    header, *body = _align(rows)
    return "\n".join([s(header, bold=True), *body])


def format_repositories(found: DiscoveredRepositories, *, color: bool = True) -> str:
    """One line per linkable repository and the connection it resolves to."""
    if not found.clone_uris:
        return "No linkable repositories found."
    s = styler(color)
    rows: list[tuple[str, ...]] = [("REPOSITORY", "CONNECTION", "CLONE URI")]
    for uri in found.clone_uris:
        parts = parse_connection_name(found.clone_uri_to_connection[uri].name)
        rows.append((extract_repo_slug(uri) or uri, parts.id if parts else "?", uri))
    header, *body = _align(rows)
    return "\n".join([s(header, bold=True), *body])


def format_link_result(repo: GitRepositoryLink, *, color: bool = True) -> str:
    s = styler(color)
    return "\n".join(
        [
            s("Successfully linked GitHub repository at remote URI", fg="green"),
            f"\t{repo.clone_uri}",
            f"\t{repo.name}",
        ]
    )
