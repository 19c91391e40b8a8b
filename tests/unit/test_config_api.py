"""Tests for the convenience API in ``apphosting_link.config``."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from apphosting_link import config as config_api
from apphosting_link.config.schema import Config, ProviderConfig


@pytest.fixture
def config() -> Config:
    return Config(provider=ProviderConfig(project="proj", location="europe-west4"))


@pytest.fixture
def provider() -> MagicMock:
    provider = MagicMock()
    provider.__enter__.return_value = provider
    provider.__exit__.return_value = False
    return provider


@patch("apphosting_link.config.LinkOrchestrator")
@patch("apphosting_link.config.provider_from_config")
def test_link_closes_provider(
    mock_provider_from_config: MagicMock,
    mock_orchestrator: MagicMock,
    config: Config,
    provider: MagicMock,
) -> None:
    mock_provider_from_config.return_value = provider
    interaction = MagicMock()

    result = config_api.link(config, interaction)

    assert result is mock_orchestrator.return_value.link_github_repository.return_value
    mock_orchestrator.assert_called_once_with(
        provider=provider, interaction=interaction, poller_options=config.poller
    )
    mock_orchestrator.return_value.link_github_repository.assert_called_once_with(
        "proj", "europe-west4"
    )
    provider.__exit__.assert_called_once()


@patch("apphosting_link.config.LinkOrchestrator")
@patch("apphosting_link.config.provider_from_config")
def test_link_closes_provider_on_error(
    mock_provider_from_config: MagicMock,
    mock_orchestrator: MagicMock,
    config: Config,
    provider: MagicMock,
) -> None:
    mock_provider_from_config.return_value = provider
    mock_orchestrator.return_value.link_github_repository.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        config_api.link(config, MagicMock())
    provider.__exit__.assert_called_once()


@patch("apphosting_link.config.RepositoryDiscovery")
@patch("apphosting_link.config.provider_from_config")
def test_list_connections_closes_provider(
    mock_provider_from_config: MagicMock,
    mock_discovery: MagicMock,
    config: Config,
    provider: MagicMock,
) -> None:
    mock_provider_from_config.return_value = provider

    result = config_api.list_connections(config)

    mock_discovery.assert_called_once_with(provider.developer_connect)
    mock_discovery.return_value.list_eligible.assert_called_once_with("proj")
    assert result is mock_discovery.return_value.list_eligible.return_value
    provider.__exit__.assert_called_once()


@patch("apphosting_link.config.RepositoryDiscovery")
@patch("apphosting_link.config.provider_from_config")
def test_list_repositories_closes_provider(
    mock_provider_from_config: MagicMock,
    mock_discovery: MagicMock,
    config: Config,
    provider: MagicMock,
) -> None:
    mock_provider_from_config.return_value = provider
    discovery = mock_discovery.return_value

    result = config_api.list_repositories(config)

    discovery.fetch_all.assert_called_once_with("proj", discovery.list_eligible.return_value)
    assert result is discovery.fetch_all.return_value
    provider.__exit__.assert_called_once()
