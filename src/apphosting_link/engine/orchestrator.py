"""Top-level flow linking a backend to a GitHub repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apphosting_link.core.names import ConnectionIdGenerator, parse_connection_name
from apphosting_link.engine.connection_handler import ConnectionHandler
from apphosting_link.engine.discovery import RepositoryDiscovery
from apphosting_link.engine.errors import MalformedInputError
from apphosting_link.engine.handlers import EngineContext
from apphosting_link.engine.iam import ensure_secret_manager_admin_grant
from apphosting_link.engine.interaction import ADD_CONNECTION_CHOICE
from apphosting_link.engine.operations import OperationPoller
from apphosting_link.engine.repository_handler import RepositoryHandler
from apphosting_link.resources.connection import GitHubConfig

if TYPE_CHECKING:
    from apphosting_link.core.provider import DeveloperConnectProvider
    from apphosting_link.engine.interaction import Interaction
    from apphosting_link.engine.operations import PollerOptions
    from apphosting_link.resources.connection import Connection
    from apphosting_link.resources.repository import GitRepositoryLink

logger = logging.getLogger(__name__)


class LinkOrchestrator:
    """Sequences the steps that end in a git repository link.

    Every step is a blocking call or a wait on the user; nothing is cached
    between steps, each decision works on freshly fetched resources.
    """

    def __init__(
        self,
        *,
        provider: DeveloperConnectProvider,
        interaction: Interaction,
        poller_options: PollerOptions | None = None,
        id_generator: ConnectionIdGenerator | None = None,
    ) -> None:
        self._provider = provider
        self._interaction = interaction
        self._ids = id_generator or ConnectionIdGenerator()
        poller = OperationPoller(provider.developer_connect, poller_options)
        self.connections = ConnectionHandler(poller, interaction)
        self.repositories = RepositoryHandler(poller)
        self.discovery = RepositoryDiscovery(provider.developer_connect)

    def _select(
        self, ctx: EngineContext, connections: list[Connection], oauth_conn: Connection
    ) -> tuple[str, Connection]:
        """Let the user pick a repository, adding connections on request."""
        while True:
            found = self.discovery.fetch_all(ctx.project_id, connections)
            clone_uri = self._interaction.select_repository(found.clone_uris)
            if clone_uri != ADD_CONNECTION_CHOICE:
                return clone_uri, found.clone_uri_to_connection[clone_uri]
            connections.append(
                self.connections.create_fully_installed(ctx, self._ids.generate(), oauth_conn)
            )

    def link_github_repository(self, project_id: str, location: str) -> GitRepositoryLink:
        """Run the full flow and return the repository link for the chosen repository.

        Steps:
            1. Get or create the sentinel OAuth connection and wait for authorization.
            2. List installed App Hosting connections; create one if there are none.
            3. Ask the user for a repository, creating more connections on request.
            4. Make sure the chosen connection exists in *location*.
            5. Get or create the repository link.
        """
        ctx = EngineContext(provider=self._provider, project_id=project_id, location=location)

        self._interaction.notify("Set up a GitHub connection")
        oauth_conn = self.connections.ensure_oauth_connection(ctx)
        logger.debug("OAuth connection: %s", oauth_conn.name)

        connections = self.discovery.list_eligible(project_id)
        if not connections:
            logger.info("No App Hosting GitHub connections exist yet")
            ensure_secret_manager_admin_grant(
                self._provider.resource_manager, self._interaction, project_id
            )
            connections.append(
                self.connections.create_fully_installed(ctx, self._ids.generate(), oauth_conn)
            )

        clone_uri, connection = self._select(ctx, connections, oauth_conn)

        parts = parse_connection_name(connection.name)
        if parts is None:
            raise MalformedInputError(f"Malformed connection name: {connection.name!r}")
        github_config = connection.github_config or GitHubConfig()
        self.connections.get_or_create(
            ctx,
            parts.id,
            GitHubConfig(
                authorizer_credential=github_config.authorizer_credential,
                app_installation_id=github_config.app_installation_id,
            ),
        )

        repo = self.repositories.get_or_create(ctx, parts.id, clone_uri)
        logger.info("Linked %s as %s", clone_uri, repo.name)
        return repo
