from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest
from pydantic import SecretStr

from apphosting_link.api.auth import BearerTokenAuth, GoogleCredentialsAuth
from apphosting_link.api.developer_connect import DeveloperConnectClient
from apphosting_link.api.resource_manager import ResourceManagerClient
from apphosting_link.core.provider import AccessTokenAuth, DeveloperConnectProvider


class TestFromClients:
    def test_returns_injected_clients(self) -> None:
        dc = MagicMock(spec=DeveloperConnectClient)
        rm = MagicMock(spec=ResourceManagerClient)
        provider = DeveloperConnectProvider.from_clients(dc, rm)
        assert provider.developer_connect is dc
        assert provider.resource_manager is rm

    def test_missing_resource_manager(self) -> None:
        provider = DeveloperConnectProvider.from_clients(MagicMock(spec=DeveloperConnectClient))
        with pytest.raises(ValueError, match="No Resource Manager client injected"):
            _ = provider.resource_manager


class TestBuiltClients:
    def test_token_auth_clients(self) -> None:
        provider = DeveloperConnectProvider(
            developer_connect_origin="https://dc.example.com",
            api_version="v1beta",
            auth=AccessTokenAuth(access_token=SecretStr("tok")),
        )
        assert isinstance(provider.http_auth, BearerTokenAuth)

        dc = provider.developer_connect
        assert isinstance(dc, DeveloperConnectClient)
        assert dc.api_version == "v1beta"
        assert dc.http.base_url.host == "dc.example.com"
        assert provider.developer_connect is dc
        assert isinstance(provider.resource_manager, ResourceManagerClient)

    def test_default_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        creds = MagicMock()
        monkeypatch.setattr("google.auth.default", MagicMock(return_value=(creds, "proj")))
        provider = DeveloperConnectProvider()
        auth = provider.http_auth
        assert isinstance(auth, GoogleCredentialsAuth)


class TestAuthFlows:
    def test_bearer_header(self) -> None:
        request = httpx.Request("GET", "https://example.com")
        flow = BearerTokenAuth("abc").auth_flow(request)
        assert next(flow).headers["Authorization"] == "Bearer abc"

    def test_refreshes_invalid_credentials(self) -> None:
        creds = MagicMock()
        creds.valid = False
        creds.token = "fresh"
        request = httpx.Request("GET", "https://example.com")

        out = next(GoogleCredentialsAuth(creds).auth_flow(request))

        creds.refresh.assert_called_once()
        assert out.headers["Authorization"] == "Bearer fresh"

    def test_valid_credentials_not_refreshed(self) -> None:
        creds = MagicMock()
        creds.valid = True
        creds.token = "cached"
        request = httpx.Request("GET", "https://example.com")

        out = next(GoogleCredentialsAuth(creds).auth_flow(request))

        creds.refresh.assert_not_called()
        assert out.headers["Authorization"] == "Bearer cached"


class TestClose:
    def test_closes_built_clients(self) -> None:
        provider = DeveloperConnectProvider(auth=AccessTokenAuth(access_token=SecretStr("tok")))
        dc = provider.developer_connect
        rm_http = provider.resource_manager._http

        provider.close()

        assert dc.http.is_closed
        assert rm_http.is_closed
        # A later access builds a fresh client.
        assert provider.developer_connect is not dc

    def test_context_manager(self) -> None:
        with DeveloperConnectProvider(
            auth=AccessTokenAuth(access_token=SecretStr("tok"))
        ) as provider:
            dc = provider.developer_connect
            assert not dc.http.is_closed
        assert dc.http.is_closed

    def test_leaves_injected_clients_open(self) -> None:
        dc = MagicMock(spec=DeveloperConnectClient)
        rm = MagicMock(spec=ResourceManagerClient)
        provider = DeveloperConnectProvider.from_clients(dc, rm)
        _ = provider.developer_connect, provider.resource_manager

        provider.close()

        dc.close.assert_not_called()
        rm.close.assert_not_called()

    def test_close_without_clients(self) -> None:
        DeveloperConnectProvider().close()
