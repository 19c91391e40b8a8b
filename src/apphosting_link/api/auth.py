"""httpx auth flows for Google APIs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import google.auth
import google.auth.transport.requests
import httpx

if TYPE_CHECKING:
    from collections.abc import Generator

    from google.auth.credentials import Credentials

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"


class BearerTokenAuth(httpx.Auth):
    """Static OAuth access token (e.g. from ``gcloud auth print-access-token``)."""

    def __init__(self, token: str) -> None:
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


class GoogleCredentialsAuth(httpx.Auth):
    """Application Default Credentials, refreshed whenever they expire."""

    def __init__(self, credentials: Credentials | None = None) -> None:
        if credentials is None:
            credentials, _ = google.auth.default(scopes=[CLOUD_PLATFORM_SCOPE])
        self._credentials = credentials

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if not self._credentials.valid:
            self._credentials.refresh(google.auth.transport.requests.Request())
        request.headers["Authorization"] = f"Bearer {self._credentials.token}"
        yield request
