"""Git repository link handler."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apphosting_link.api.errors import NotFoundError
from apphosting_link.core.names import generate_repository_id
from apphosting_link.engine.errors import MalformedInputError
from apphosting_link.engine.handlers import ResourceHandler
from apphosting_link.resources.repository import GitRepositoryLink

if TYPE_CHECKING:
    from apphosting_link.engine.handlers import EngineContext

logger = logging.getLogger(__name__)


class RepositoryHandler(ResourceHandler[GitRepositoryLink]):
    """Get-or-create for git repository links nested under a connection."""

    resource_model = GitRepositoryLink

    def fetch(
        self, ctx: EngineContext, connection_id: str, repository_id: str
    ) -> GitRepositoryLink:
        return ctx.client.get_git_repository_link(
            ctx.project_id, ctx.location, connection_id, repository_id
        )

    def create(
        self, ctx: EngineContext, connection_id: str, repository_id: str, clone_uri: str
    ) -> GitRepositoryLink:
        logger.info("Linking %s as %s/%s", clone_uri, connection_id, repository_id)
        op = ctx.client.create_git_repository_link(
            ctx.project_id, ctx.location, connection_id, repository_id, clone_uri
        )
        return self._wait(
            op, poller_name=f"create-{ctx.location}-{connection_id}-{repository_id}"
        )

    def get_or_create(
        self, ctx: EngineContext, connection_id: str, clone_uri: str
    ) -> GitRepositoryLink:
        repository_id = generate_repository_id(clone_uri)
        if repository_id is None:
            raise MalformedInputError(f'Failed to generate repositoryId for URI "{clone_uri}".')
        try:
            return self.fetch(ctx, connection_id, repository_id)
        except NotFoundError:
            logger.debug("Repository link %s not found", repository_id)
        return self.create(ctx, connection_id, repository_id, clone_uri)
