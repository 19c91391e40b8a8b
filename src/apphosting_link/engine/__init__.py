"""Provisioning engine for GitHub connections and repository links."""

from apphosting_link.engine.connection_handler import ConnectionHandler
from apphosting_link.engine.discovery import DiscoveredRepositories, RepositoryDiscovery
from apphosting_link.engine.errors import (
    InsufficientPermissionsError,
    LinkError,
    MalformedInputError,
    OperationFailedError,
    OperationTimeoutError,
)
from apphosting_link.engine.handlers import EngineContext, ResourceHandler
from apphosting_link.engine.interaction import ADD_CONNECTION_CHOICE, Interaction
from apphosting_link.engine.operations import OperationPoller, PollerOptions
from apphosting_link.engine.orchestrator import LinkOrchestrator
from apphosting_link.engine.repository_handler import RepositoryHandler

__all__ = [
    "ADD_CONNECTION_CHOICE",
    "ConnectionHandler",
    "DiscoveredRepositories",
    "EngineContext",
    "InsufficientPermissionsError",
    "Interaction",
    "LinkError",
    "LinkOrchestrator",
    "MalformedInputError",
    "OperationFailedError",
    "OperationPoller",
    "OperationTimeoutError",
    "PollerOptions",
    "RepositoryDiscovery",
    "RepositoryHandler",
    "ResourceHandler",
]
