"""Terminal implementation of the engine's ``Interaction`` protocol."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.table import Table

from apphosting_link.core.names import extract_repo_slug
from apphosting_link.engine.interaction import ADD_CONNECTION_CHOICE, fuzzy_filter

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

_ADD_CONNECTION_LABEL = (
    "Missing a repo? Select this option to configure your GitHub connection settings"
)
_SELECT_MESSAGE = "Which of the following repositories would you like to deploy?"


def _slug(clone_uri: str) -> str:
    return extract_repo_slug(clone_uri) or ""


class TerminalInteraction:
    """Prompts on the terminal, opens URLs with the system browser."""

    def __init__(self, *, color: bool = True, console: Console | None = None) -> None:
        self._color = color
        self._console = console or Console(no_color=not color, highlight=False)

    def notify(self, message: str) -> None:
        bullet = typer.style("i ", fg=typer.colors.CYAN) if self._color else "i "
        typer.echo(f"{bullet} {message}")

    def open_url(self, url: str) -> None:
        self.notify(url)
        if typer.launch(url) != 0:
            logger.warning("Could not open a browser; visit the URL above manually")

    def wait_for_continue(self, message: str) -> None:
        typer.prompt(message, default="", show_default=False, prompt_suffix=" ")

    def confirm(self, message: str) -> bool:
        return typer.confirm(message, default=True)

    def _render_choices(self, matches: Sequence[str]) -> None:
        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column(justify="right", style="bold")
        table.add_column()
        table.add_row("0", _ADD_CONNECTION_LABEL)
        for i, uri in enumerate(matches, start=1):
            table.add_row(str(i), _slug(uri))
        self._console.print(table)

    def select_repository(self, clone_uris: Sequence[str]) -> str:
        """Numbered menu; any non-numeric answer narrows the list by fuzzy match."""
        query = ""
        while True:
            matches = fuzzy_filter(query, clone_uris, extract=_slug)
            self._console.print(_SELECT_MESSAGE, style="bold")
            self._render_choices(matches)
            answer = typer.prompt(
                "Enter a number, or text to filter", default="", show_default=False
            ).strip()
            if answer.isdigit():
                idx = int(answer)
                if idx == 0:
                    return ADD_CONNECTION_CHOICE
                if idx <= len(matches):
                    return matches[idx - 1]
                self.notify(f"No choice numbered {idx}")
                continue
            query = answer
