"""Resource name parsing and id derivation for Developer Connect resources."""

from __future__ import annotations

import random
import re
import string
from dataclasses import dataclass

APPHOSTING_OAUTH_CONNECTION_ID = "apphosting-github-oauth"
APPHOSTING_CONNECTION_PREFIX = "apphosting-github-conn-"

_APPHOSTING_CONNECTION_PATTERN = re.compile(r".+/apphosting-github-conn-.+$")
_CONNECTION_NAME_PATTERN = re.compile(
    r"^projects/(?P<project_id>[^/]+)/locations/(?P<location>[^/]+)/connections/(?P<id>[^/]+)$"
)
_REPO_SLUG_PATTERN = re.compile(r"github\.com/(.+)\.git")

_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase
_SUFFIX_LENGTH = 6


@dataclass(frozen=True)
class ConnectionName:
    """Structured form of ``projects/{p}/locations/{l}/connections/{id}``."""

    project_id: str
    location: str
    id: str

    def __str__(self) -> str:
        return f"projects/{self.project_id}/locations/{self.location}/connections/{self.id}"


def parse_connection_name(name: str) -> ConnectionName | None:
    """Parse a full connection resource name.

    Returns None for anything that is not exactly the four-segment form,
    including names of resources nested under a connection.

    Example:
        >>> parse_connection_name("projects/p/locations/us-central1/connections/c")
        ConnectionName(project_id='p', location='us-central1', id='c')
    """
    match = _CONNECTION_NAME_PATTERN.match(name)
    if match is None:
        return None
    return ConnectionName(
        project_id=match.group("project_id"),
        location=match.group("location"),
        id=match.group("id"),
    )


def is_apphosting_connection_name(name: str) -> bool:
    """True if the name ends with a generated App Hosting connection id."""
    return _APPHOSTING_CONNECTION_PATTERN.match(name) is not None


def extract_repo_slug(clone_uri: str) -> str | None:
    """Return the ``owner/repo`` part of a GitHub clone URI.

    Example:
        >>> extract_repo_slug("https://github.com/user/repo.git")
        'user/repo'
    """
    match = _REPO_SLUG_PATTERN.search(clone_uri)
    if match is None:
        return None
    return match.group(1)


def generate_repository_id(clone_uri: str) -> str | None:
    """Derive the git repository link id for a clone URI.

    One connection holds many repository links, so the id only has to be
    unique per connection; the slug with separators replaced is enough.
    """
    slug = extract_repo_slug(clone_uri)
    if slug is None:
        return None
    return slug.replace("/", "-")


class ConnectionIdGenerator:
    """Generates ids recognized as App Hosting GitHub connections.

    The random source is injected so tests can seed it.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def generate(self) -> str:
        suffix = "".join(self._rng.choice(_SUFFIX_ALPHABET) for _ in range(_SUFFIX_LENGTH))
        return f"{APPHOSTING_CONNECTION_PREFIX}{suffix}"
