"""Repository discovery across App Hosting connections."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel

from apphosting_link.core.names import is_apphosting_connection_name, parse_connection_name
from apphosting_link.engine.errors import MalformedInputError
from apphosting_link.resources.connection import Connection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from apphosting_link.api.developer_connect import DeveloperConnectClient

logger = logging.getLogger(__name__)

# Wildcard location: list across every region.
ALL_LOCATIONS = "-"


class DiscoveredRepositories(BaseModel):
    """Clone URIs reachable through a set of connections.

    ``clone_uris`` follows first-seen order; ``clone_uri_to_connection`` maps
    each URI to the last connection that listed it.
    """

    clone_uris: list[str]
    clone_uri_to_connection: dict[str, Connection]


class RepositoryDiscovery:
    def __init__(self, client: DeveloperConnectClient) -> None:
        self._client = client

    def list_repositories(self, project_id: str, connection: Connection) -> list[str]:
        """All linkable clone URIs for one connection, across every page."""
        parts = parse_connection_name(connection.name)
        if parts is None:
            raise MalformedInputError(f"Malformed connection name: {connection.name!r}")

        clone_uris: list[str] = []
        page_token: str | None = None
        while True:
            page = self._client.fetch_linkable_git_repositories(
                project_id, parts.location, parts.id, page_token=page_token
            )
            clone_uris.extend(r.clone_uri for r in page.linkable_git_repositories)
            page_token = page.next_page_token
            if not page_token:
                break
        logger.debug("Connection %s lists %d repositories", parts.id, len(clone_uris))
        return clone_uris

    def fetch_all(
        self, project_id: str, connections: Sequence[Connection]
    ) -> DiscoveredRepositories:
        """Aggregate linkable repositories over *connections*.

        A clone URI listed by several connections resolves to the one that
        comes last in *connections*.
        """
        clone_uri_to_connection: dict[str, Connection] = {}
        for conn in connections:
            for clone_uri in self.list_repositories(project_id, conn):
                clone_uri_to_connection[clone_uri] = conn
        return DiscoveredRepositories(
            clone_uris=list(clone_uri_to_connection),
            clone_uri_to_connection=clone_uri_to_connection,
        )

    def list_eligible(self, project_id: str) -> list[Connection]:
        """Installed, enabled App Hosting connections in any location.

        The sentinel OAuth connection never matches the generated-id pattern
        and so is never returned.
        """
        conns = self._client.list_all_connections(project_id, ALL_LOCATIONS)
        eligible = [c for c in conns if is_apphosting_connection_name(c.name) and c.is_usable]
        logger.debug("%d of %d connections are eligible", len(eligible), len(conns))
        return eligible
