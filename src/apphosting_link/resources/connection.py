"""Developer Connect connection resource models."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from apphosting_link.resources.base import ApiResource


class InstallationStage(str, Enum):
    STAGE_UNSPECIFIED = "STAGE_UNSPECIFIED"
    PENDING_CREATE_APP = "PENDING_CREATE_APP"
    PENDING_USER_OAUTH = "PENDING_USER_OAUTH"
    PENDING_INSTALL_APP = "PENDING_INSTALL_APP"
    COMPLETE = "COMPLETE"


class InstallationState(ApiResource):
    # Plain str: stages unknown to this client pass through untouched.
    stage: str = InstallationStage.STAGE_UNSPECIFIED.value
    message: str = ""
    action_uri: str = ""


class OAuthCredential(ApiResource):
    oauth_token_secret_version: str | None = None
    username: str | None = None


class GitHubConfig(ApiResource):
    """GitHub-specific connection settings.

    ``authorizer_credential`` and ``app_installation_id`` are copied forward
    when new connections are spawned from an existing one.
    """

    github_app: str | None = "FIREBASE"
    authorizer_credential: OAuthCredential | None = None
    app_installation_id: str | None = None


class Connection(ApiResource):
    name: str
    installation_state: InstallationState = Field(default_factory=InstallationState)
    disabled: bool = False
    github_config: GitHubConfig | None = None
    create_time: str | None = None
    update_time: str | None = None
    reconciling: bool = False
    etag: str | None = None
    uid: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.installation_state.stage == InstallationStage.COMPLETE

    @property
    def is_usable(self) -> bool:
        """Installed and enabled, i.e. repositories can be linked through it."""
        return self.is_complete and not self.disabled


class ConnectionPage(ApiResource):
    connections: list[Connection] = Field(default_factory=list)
    next_page_token: str | None = None
    unreachable: list[str] = Field(default_factory=list)
