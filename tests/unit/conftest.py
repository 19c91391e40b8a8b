"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from apphosting_link.api.developer_connect import DeveloperConnectClient
from apphosting_link.api.resource_manager import ResourceManagerClient
from apphosting_link.core.provider import DeveloperConnectProvider
from apphosting_link.engine.handlers import EngineContext
from apphosting_link.resources.connection import Connection

if TYPE_CHECKING:
    from collections.abc import Callable

PROJECT = "projectId"
LOCATION = "us-central1"

_APPHOSTING_ENV_VARS = (
    "APPHOSTING_PROJECT",
    "APPHOSTING_LOCATION",
    "APPHOSTING_ACCESS_TOKEN",
    "APPHOSTING_DEVELOPER_CONNECT_ORIGIN",
    "APPHOSTING_API_VERSION",
    "APPHOSTING_RESOURCE_MANAGER_ORIGIN",
    "APPHOSTING_LOG",
)


@pytest.fixture(autouse=True)
def _clean_apphosting_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove APPHOSTING_* env vars so unit tests don't leak host config."""
    for var in _APPHOSTING_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_connection() -> Callable[..., Connection]:
    """Factory fixture: build a Connection named under PROJECT."""

    def _make(
        conn_id: str,
        *,
        stage: str = "COMPLETE",
        location: str = LOCATION,
        disabled: bool = False,
        action_uri: str = "https://google.com",
        github_config: dict | None = None,
    ) -> Connection:
        data: dict = {
            "name": f"projects/{PROJECT}/locations/{location}/connections/{conn_id}",
            "disabled": disabled,
            "createTime": "0",
            "updateTime": "1",
            "installationState": {
                "stage": stage,
                "message": stage.lower(),
                "actionUri": action_uri,
            },
            "reconciling": False,
        }
        if github_config is not None:
            data["githubConfig"] = github_config
        return Connection.model_validate(data)

    return _make


@pytest.fixture
def mock_client() -> MagicMock:
    return MagicMock(spec=DeveloperConnectClient)


@pytest.fixture
def mock_resource_manager() -> MagicMock:
    return MagicMock(spec=ResourceManagerClient)


@pytest.fixture
def provider(mock_client: MagicMock, mock_resource_manager: MagicMock) -> DeveloperConnectProvider:
    return DeveloperConnectProvider.from_clients(mock_client, mock_resource_manager)


@pytest.fixture
def ctx(provider: DeveloperConnectProvider) -> EngineContext:
    return EngineContext(provider=provider, project_id=PROJECT, location=LOCATION)


@pytest.fixture
def interaction() -> MagicMock:
    return MagicMock()
