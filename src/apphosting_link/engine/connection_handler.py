"""Connection handler: get-or-create plus the GitHub authorization steps."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apphosting_link.api.errors import NotFoundError
from apphosting_link.core.names import APPHOSTING_OAUTH_CONNECTION_ID, parse_connection_name
from apphosting_link.engine.errors import MalformedInputError
from apphosting_link.engine.handlers import ResourceHandler
from apphosting_link.resources.connection import Connection, GitHubConfig, InstallationStage

if TYPE_CHECKING:
    from apphosting_link.engine.handlers import EngineContext
    from apphosting_link.engine.interaction import Interaction
    from apphosting_link.engine.operations import OperationPoller

logger = logging.getLogger(__name__)


def direct_install_uri(action_uri: str) -> str:
    """Point an app-install action URI at GitHub's direct install page."""
    if "direct_install_v2" in action_uri:
        return action_uri
    return action_uri.replace("install_v2", "direct_install_v2")


class ConnectionHandler(ResourceHandler[Connection]):
    """Provisions Developer Connect GitHub connections.

    Two installation flows exist. The sentinel OAuth connection loops until
    the user has authorized the GitHub app. Every other connection gets a
    single app-install prompt followed by one re-check.
    """

    resource_model = Connection

    def __init__(self, poller: OperationPoller, interaction: Interaction) -> None:
        super().__init__(poller)
        self._interaction = interaction

    def fetch(self, ctx: EngineContext, connection_id: str) -> Connection:
        return ctx.client.get_connection(ctx.project_id, ctx.location, connection_id)

    def create(
        self,
        ctx: EngineContext,
        connection_id: str,
        github_config: GitHubConfig | None = None,
    ) -> Connection:
        """Create a connection and wait for the operation to finish.

        The connection usually still needs authorization or app installation
        afterwards.
        """
        logger.info("Creating connection %s in %s", connection_id, ctx.location)
        op = ctx.client.create_connection(
            ctx.project_id, ctx.location, connection_id, github_config
        )
        return self._wait(op, poller_name=f"create-{ctx.location}-{connection_id}")

    def get_or_create(
        self,
        ctx: EngineContext,
        connection_id: str,
        github_config: GitHubConfig | None = None,
    ) -> Connection:
        try:
            return self.fetch(ctx, connection_id)
        except NotFoundError:
            logger.debug("Connection %s not found", connection_id)
        return self.create(ctx, connection_id, github_config)

    def ensure_oauth_connection(self, ctx: EngineContext) -> Connection:
        """Get or create the sentinel OAuth connection and wait until it is authorized.

        The sentinel holds the GitHub OAuth token reused to create further
        connections without prompting again. Loops for as long as the
        connection reports ``PENDING_USER_OAUTH``.
        """
        conn = self.get_or_create(ctx, APPHOSTING_OAUTH_CONNECTION_ID)
        while conn.installation_state.stage == InstallationStage.PENDING_USER_OAUTH:
            self._interaction.notify("You must authorize the Firebase GitHub app.")
            self._interaction.notify("Sign in to GitHub and authorize Firebase GitHub app:")
            self._interaction.open_url(conn.installation_state.action_uri)
            self._interaction.wait_for_continue("Press Enter once you have authorized the app")
            parts = parse_connection_name(conn.name)
            if parts is None:
                raise MalformedInputError(f"Malformed connection name: {conn.name!r}")
            conn = ctx.client.get_connection(parts.project_id, parts.location, parts.id)
        return conn

    def ensure_fully_installed(
        self, ctx: EngineContext, connection_id: str, connection: Connection
    ) -> Connection:
        """Prompt for the GitHub app installation if *connection* is not complete.

        Re-fetches ``connection_id`` once after the user confirms and returns
        it whatever its stage.
        """
        if connection.is_complete:
            return connection
        self._interaction.notify(
            "Install the Firebase GitHub app to enable access to GitHub repositories"
        )
        self._interaction.open_url(direct_install_uri(connection.installation_state.action_uri))
        self._interaction.wait_for_continue(
            "Press Enter once you have installed or configured the Firebase GitHub app "
            "to access your GitHub repo."
        )
        return self.fetch(ctx, connection_id)

    def create_fully_installed(
        self, ctx: EngineContext, connection_id: str, oauth_connection: Connection
    ) -> Connection:
        """Create a connection reusing the sentinel's OAuth credential, then install the app."""
        credential = (
            oauth_connection.github_config.authorizer_credential
            if oauth_connection.github_config
            else None
        )
        conn = self.create(ctx, connection_id, GitHubConfig(authorizer_credential=credential))
        conn = self.ensure_fully_installed(ctx, connection_id, conn)
        logger.info("Created connection %s (stage=%s)", conn.name, conn.installation_state.stage)
        return conn
