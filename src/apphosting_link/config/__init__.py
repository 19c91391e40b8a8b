"""Configuration loading and convenience linking API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import SecretStr

from apphosting_link.config.loader import ConfigError, load_config
from apphosting_link.config.schema import Config, ProviderConfig
from apphosting_link.core.provider import AccessTokenAuth, DeveloperConnectProvider
from apphosting_link.engine.discovery import RepositoryDiscovery
from apphosting_link.engine.orchestrator import LinkOrchestrator

if TYPE_CHECKING:
    from pathlib import Path

    from apphosting_link.engine.discovery import DiscoveredRepositories
    from apphosting_link.engine.interaction import Interaction
    from apphosting_link.resources.connection import Connection
    from apphosting_link.resources.repository import GitRepositoryLink

__all__ = [
    "Config",
    "ConfigError",
    "ProviderConfig",
    "link",
    "list_connections",
    "list_repositories",
    "load",
    "load_config",
    "provider_from_config",
]


def load(
    path: Path | str, *, overrides: dict[str, Any] | None = None, required: bool = True
) -> Config:
    """Load a YAML configuration file."""
    return load_config(path, overrides=overrides, required=required)


def provider_from_config(config: Config) -> DeveloperConnectProvider:
    """Build a ``DeveloperConnectProvider`` from a ``Config`` instance."""
    p = config.provider
    auth = AccessTokenAuth(access_token=SecretStr(p.access_token)) if p.access_token else None
    return DeveloperConnectProvider(
        developer_connect_origin=p.developer_connect_origin,
        api_version=p.api_version,
        resource_manager_origin=p.resource_manager_origin,
        auth=auth,
    )


def link(config: Config, interaction: Interaction) -> GitRepositoryLink:
    """Interactively link a GitHub repository in the configured project/location."""
    with provider_from_config(config) as provider:
        orchestrator = LinkOrchestrator(
            provider=provider, interaction=interaction, poller_options=config.poller
        )
        return orchestrator.link_github_repository(
            config.provider.project, config.provider.location
        )


def list_connections(config: Config) -> list[Connection]:
    """Installed, enabled App Hosting GitHub connections of the project."""
    with provider_from_config(config) as provider:
        discovery = RepositoryDiscovery(provider.developer_connect)
        return discovery.list_eligible(config.provider.project)


def list_repositories(config: Config) -> DiscoveredRepositories:
    """Repositories linkable through the project's eligible connections."""
    project = config.provider.project
    with provider_from_config(config) as provider:
        discovery = RepositoryDiscovery(provider.developer_connect)
        return discovery.fetch_all(project, discovery.list_eligible(project))
