"""Port: GitHub gateway — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from github_picker.domain.models import Branch, Repository, Tag


class GitHubGateway(Protocol):
    """Abstract contract for the four GitHub API calls the picker makes.

    Listing methods raise :class:`UpstreamFailure` on any unusable response.
    """

    @property
    def api_base(self) -> str:
        """Base URL used to synthesise branch zipball links."""
        ...

    def user_exists(self, username: str) -> bool:
        """Return whether ``GET /users/{username}`` answered 200 with a body."""
        ...

    def list_repositories(self, username: str) -> list[Repository]:
        """Return the user's repositories, most recently updated first."""
        ...

    def list_tags(self, username: str, repository: str) -> list[Tag]:
        """Return the first page of tags of a repository."""
        ...

    def list_branches(self, username: str, repository: str) -> list[Branch]:
        """Return the first page of branches of a repository."""
        ...
