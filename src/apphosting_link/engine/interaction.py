"""Human-in-the-loop interface used by the linking flow.

The engine never talks to a terminal or a browser directly. It calls an
``Interaction`` implementation; the CLI provides one built on typer and rich,
tests provide mocks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

from rapidfuzz import fuzz, process

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

T = TypeVar("T")

# Selection value meaning "none of these, set up another connection".
ADD_CONNECTION_CHOICE = "@ADD_CONN"

# partial_ratio score (0-100) a candidate needs to stay in a filtered list.
MIN_MATCH_SCORE = 60


class Interaction(Protocol):
    def notify(self, message: str) -> None:
        """Show a status line to the user."""

    def open_url(self, url: str) -> None:
        """Open *url* in a browser (and show it, in case that fails)."""

    def wait_for_continue(self, message: str) -> None:
        """Block until the user signals an out-of-band step is done."""

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question."""

    def select_repository(self, clone_uris: Sequence[str]) -> str:
        """Return one of *clone_uris*, or ``ADD_CONNECTION_CHOICE``."""


def fuzzy_filter(query: str, candidates: Sequence[T], extract: Callable[[T], str]) -> list[T]:
    """Filter *candidates* whose extracted text fuzzily matches *query*.

    Matching is case-insensitive partial-ratio scoring from rapidfuzz.
    Results are ordered best match first; ties keep input order. An empty
    query returns every candidate.
    """
    needle = query.lower()
    if not needle:
        return list(candidates)
    haystack = [extract(c).lower() for c in candidates]
    matches = process.extract(
        needle, haystack, scorer=fuzz.partial_ratio, limit=None, score_cutoff=MIN_MATCH_SCORE
    )
    matches.sort(key=lambda m: (-m[1], m[2]))
    return [candidates[index] for _, _, index in matches]
