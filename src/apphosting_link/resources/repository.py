"""Git repository link models."""

from __future__ import annotations

from pydantic import Field

from apphosting_link.resources.base import ApiResource


class GitRepositoryLink(ApiResource):
    """A GitHub repository made available through a connection."""

    name: str
    clone_uri: str
    create_time: str | None = None
    update_time: str | None = None
    delete_time: str | None = None
    reconciling: bool = False
    uid: str | None = None
    etag: str | None = None


class LinkableGitRepository(ApiResource):
    clone_uri: str


class LinkableGitRepositoryPage(ApiResource):
    linkable_git_repositories: list[LinkableGitRepository] = Field(default_factory=list)
    next_page_token: str | None = None
