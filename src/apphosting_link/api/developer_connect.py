"""Developer Connect REST client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from apphosting_link.api.errors import raise_for_status
from apphosting_link.resources.connection import Connection, ConnectionPage
from apphosting_link.resources.operation import Operation
from apphosting_link.resources.repository import GitRepositoryLink, LinkableGitRepositoryPage

if TYPE_CHECKING:
    import httpx

    from apphosting_link.resources.connection import GitHubConfig

logger = logging.getLogger(__name__)

DEFAULT_ORIGIN = "https://developerconnect.googleapis.com"
DEFAULT_API_VERSION = "v1"

_LINKABLE_PAGE_SIZE = 100


def service_agent_email(project_number: str) -> str:
    """Email of the Developer Connect service agent for a project number."""
    return f"service-{project_number}@gcp-sa-devconnect.iam.gserviceaccount.com"


class DeveloperConnectClient:
    """Thin wrapper over the Developer Connect API.

    Every non-2xx response is raised as a typed ``ApiError`` (``NotFoundError``
    for 404), so callers never inspect status codes themselves.
    """

    def __init__(self, http: httpx.Client, *, api_version: str = DEFAULT_API_VERSION) -> None:
        self._http = http
        self._api_version = api_version

    @property
    def http(self) -> httpx.Client:
        return self._http

    def close(self) -> None:
        self._http.close()

    @property
    def api_version(self) -> str:
        return self._api_version

    def _url(self, resource: str) -> str:
        return f"/{self._api_version}/{resource}"

    def _request(
        self,
        method: str,
        resource: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = self._url(resource)
        logger.debug("%s %s params=%s", method, url, params)
        response = self._http.request(method, url, params=params, json=json)
        raise_for_status(response)
        return response.json() if response.content else {}

    # Connections

    def get_connection(self, project_id: str, location: str, connection_id: str) -> Connection:
        data = self._request(
            "GET", f"projects/{project_id}/locations/{location}/connections/{connection_id}"
        )
        return Connection.model_validate(data)

    def list_connections(
        self, project_id: str, location: str, *, page_token: str | None = None
    ) -> ConnectionPage:
        params = {"pageToken": page_token} if page_token else None
        data = self._request(
            "GET", f"projects/{project_id}/locations/{location}/connections", params=params
        )
        return ConnectionPage.model_validate(data)

    def list_all_connections(self, project_id: str, location: str) -> list[Connection]:
        """List every connection, following page tokens. ``location`` may be ``-``."""
        connections: list[Connection] = []
        page_token: str | None = None
        while True:
            page = self.list_connections(project_id, location, page_token=page_token)
            connections.extend(page.connections)
            page_token = page.next_page_token
            if not page_token:
                return connections

    def create_connection(
        self,
        project_id: str,
        location: str,
        connection_id: str,
        github_config: GitHubConfig | None = None,
    ) -> Operation:
        body: dict[str, Any] = {
            "githubConfig": github_config.to_api() if github_config else {"githubApp": "FIREBASE"}
        }
        data = self._request(
            "POST",
            f"projects/{project_id}/locations/{location}/connections",
            params={"connectionId": connection_id},
            json=body,
        )
        return Operation.model_validate(data)

    # Git repository links

    def get_git_repository_link(
        self, project_id: str, location: str, connection_id: str, repository_id: str
    ) -> GitRepositoryLink:
        data = self._request(
            "GET",
            f"projects/{project_id}/locations/{location}/connections/{connection_id}"
            f"/gitRepositoryLinks/{repository_id}",
        )
        return GitRepositoryLink.model_validate(data)

    def create_git_repository_link(
        self,
        project_id: str,
        location: str,
        connection_id: str,
        repository_id: str,
        clone_uri: str,
    ) -> Operation:
        data = self._request(
            "POST",
            f"projects/{project_id}/locations/{location}/connections/{connection_id}"
            "/gitRepositoryLinks",
            params={"gitRepositoryLinkId": repository_id},
            json={"cloneUri": clone_uri},
        )
        return Operation.model_validate(data)

    def fetch_linkable_git_repositories(
        self,
        project_id: str,
        location: str,
        connection_id: str,
        *,
        page_token: str | None = None,
        page_size: int = _LINKABLE_PAGE_SIZE,
    ) -> LinkableGitRepositoryPage:
        """Fetch one page of repositories the connection can see."""
        params: dict[str, Any] = {"pageSize": page_size}
        if page_token:
            params["pageToken"] = page_token
        data = self._request(
            "GET",
            f"projects/{project_id}/locations/{location}/connections/{connection_id}"
            ":fetchLinkableGitRepositories",
            params=params,
        )
        return LinkableGitRepositoryPage.model_validate(data)

    # Operations

    def get_operation(self, name: str) -> Operation:
        return Operation.model_validate(self._request("GET", name))
