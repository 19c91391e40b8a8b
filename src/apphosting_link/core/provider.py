"""Provider - API client configuration for Developer Connect and IAM."""

from functools import cached_property
from typing import Self

import httpx
from pydantic import BaseModel, ConfigDict, SecretStr

from apphosting_link.api import developer_connect, resource_manager
from apphosting_link.api.auth import BearerTokenAuth, GoogleCredentialsAuth
from apphosting_link.api.developer_connect import DeveloperConnectClient
from apphosting_link.api.resource_manager import ResourceManagerClient


class AccessTokenAuth(BaseModel):
    """Static OAuth access token authentication."""

    access_token: SecretStr


class DeveloperConnectProvider(BaseModel):
    """Connection configuration for the Google APIs the linking flow talks to.

    Without ``auth``, Application Default Credentials are used. For testing,
    use the `from_clients` classmethod to inject pre-built clients.

    Examples:
        # Application Default Credentials
        provider = DeveloperConnectProvider()

        # Explicit token
        provider = DeveloperConnectProvider(
            auth=AccessTokenAuth(access_token="ya29..."),
        )
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    developer_connect_origin: str = developer_connect.DEFAULT_ORIGIN
    api_version: str = developer_connect.DEFAULT_API_VERSION
    resource_manager_origin: str = resource_manager.DEFAULT_ORIGIN
    auth: AccessTokenAuth | None = None
    timeout: float = 60.0

    # Injected clients (for testing)
    _injected_developer_connect: DeveloperConnectClient | None = None
    _injected_resource_manager: ResourceManagerClient | None = None

    @classmethod
    def from_clients(
        cls,
        developer_connect_client: DeveloperConnectClient,
        resource_manager_client: ResourceManagerClient | None = None,
    ) -> Self:
        """Create a provider with injected clients.

        Args:
            developer_connect_client: Client used for connections, links and operations
            resource_manager_client: Client used for project lookup and IAM grants
        """
        provider = cls.model_construct()
        provider._injected_developer_connect = developer_connect_client
        provider._injected_resource_manager = resource_manager_client
        return provider

    @cached_property
    def http_auth(self) -> httpx.Auth:
        if self.auth is not None:
            return BearerTokenAuth(self.auth.access_token.get_secret_value())
        return GoogleCredentialsAuth()

    def _http_client(self, origin: str) -> httpx.Client:
        return httpx.Client(base_url=origin, auth=self.http_auth, timeout=self.timeout)

    @cached_property
    def developer_connect(self) -> DeveloperConnectClient:
        """Get the Developer Connect client."""
        if self._injected_developer_connect is not None:
            return self._injected_developer_connect
        return DeveloperConnectClient(
            self._http_client(self.developer_connect_origin),
            api_version=self.api_version,
        )

    @cached_property
    def resource_manager(self) -> ResourceManagerClient:
        """Get the Resource Manager client."""
        if self._injected_resource_manager is not None:
            return self._injected_resource_manager
        if self._injected_developer_connect is not None:
            raise ValueError(
                "No Resource Manager client injected; pass one to "
                "DeveloperConnectProvider.from_clients()"
            )
        return ResourceManagerClient(self._http_client(self.resource_manager_origin))

    def close(self) -> None:
        """Close the HTTP clients built by this provider; injected clients stay open."""
        built = (
            ("developer_connect", self._injected_developer_connect),
            ("resource_manager", self._injected_resource_manager),
        )
        for attr, injected in built:
            client = self.__dict__.pop(attr, None)
            if client is not None and client is not injected:
                client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
