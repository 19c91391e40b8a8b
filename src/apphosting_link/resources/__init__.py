"""Developer Connect resource definitions."""

from apphosting_link.resources.connection import (
    Connection,
    ConnectionPage,
    GitHubConfig,
    InstallationStage,
    InstallationState,
    OAuthCredential,
)
from apphosting_link.resources.operation import Operation, OperationError
from apphosting_link.resources.repository import (
    GitRepositoryLink,
    LinkableGitRepository,
    LinkableGitRepositoryPage,
)

__all__ = [
    "Connection",
    "ConnectionPage",
    "GitHubConfig",
    "GitRepositoryLink",
    "InstallationStage",
    "InstallationState",
    "LinkableGitRepository",
    "LinkableGitRepositoryPage",
    "OAuthCredential",
    "Operation",
    "OperationError",
]
