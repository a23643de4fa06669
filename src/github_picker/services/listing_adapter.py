"""Listing adapter — turns routed requests into uniform picker entries.

Repositories become folders, tags and branches become downloadable zipballs
and meta-folders are synthesised locally.  Upstream ordering is kept as is.
"""

from __future__ import annotations

import logging

from github_picker.domain.entities import EntryKind, ListingEntry
from github_picker.domain.models import Branch, Repository, Tag
from github_picker.domain.ports.github_gateway import GitHubGateway
from github_picker.domain.ports.presentation import IconResolver
from github_picker.domain.value_objects import (
    BRANCHES_SEGMENT,
    TAGS_SEGMENT,
    Credential,
    ListingFeatures,
    ListingKind,
    ListingRequest,
)

logger = logging.getLogger(__name__)


# ── Entity mapping ──────────────────────────────────────────────────────────


def zipball_title(repository: str, ref: str) -> str:
    return f"{repository}-{ref}.zip"


def repository_entry(repo: Repository, icons: IconResolver | None = None) -> ListingEntry:
    """Repository → folder named after it.  GitHub reports ``size`` in KiB."""
    return ListingEntry(
        title=repo.name,
        kind=EntryKind.FOLDER,
        path=repo.name,
        size=repo.size * 1024,
        modified_at=repo.updated_at,
        short_title=f"{repo.name}: {repo.description or ''}",
        thumbnail=icons.folder_icon() if icons else None,
    )


def tag_entry(tag: Tag, repository: str, icons: IconResolver | None = None) -> ListingEntry:
    """Tag → zipball file linked to the tag's ``zipball_url``."""
    title = zipball_title(repository, tag.name)
    return ListingEntry(
        title=title,
        kind=EntryKind.FILE,
        source=tag.zipball_url,
        metadata_url=tag.commit.url,
        short_title=tag.name,
        thumbnail=icons.file_icon(title) if icons else None,
    )


def branch_entry(
    branch: Branch,
    username: str,
    repository: str,
    api_base: str,
    icons: IconResolver | None = None,
) -> ListingEntry:
    """Branch → zipball file.  The branches endpoint has no zip link, so it is built."""
    title = zipball_title(repository, branch.name)
    return ListingEntry(
        title=title,
        kind=EntryKind.FILE,
        source=f"{api_base}/repos/{username}/{repository}/zipball/{branch.name}",
        metadata_url=branch.commit.url,
        short_title=branch.name,
        thumbnail=icons.file_icon(title) if icons else None,
    )


def meta_folders(
    repository: str,
    features: ListingFeatures = ListingFeatures(),
    icons: IconResolver | None = None,
) -> list[ListingEntry]:
    """The synthetic Tags / Branches folders shown inside a repository."""
    folder_icon = icons.folder_icon() if icons else None
    entries = [
        ListingEntry(
            title="Tags",
            kind=EntryKind.FOLDER,
            path=f"{repository}/{TAGS_SEGMENT}",
            thumbnail=folder_icon,
        )
    ]
    if features.include_branches:
        entries.append(
            ListingEntry(
                title="Branches",
                kind=EntryKind.FOLDER,
                path=f"{repository}/{BRANCHES_SEGMENT}",
                thumbnail=folder_icon,
            )
        )
    return entries


# ── Adapter ─────────────────────────────────────────────────────────────────


class ListingAdapter:
    """Fetches and normalises one listing per call.

    Raises :class:`UpstreamFailure` when the GitHub call is unusable; the
    caller decides how to surface it.
    """

    def __init__(
        self,
        gateway: GitHubGateway,
        icons: IconResolver | None = None,
        features: ListingFeatures = ListingFeatures(),
    ) -> None:
        self._gateway = gateway
        self._icons = icons
        self._features = features

    @property
    def features(self) -> ListingFeatures:
        return self._features

    def fetch(self, request: ListingRequest, credential: Credential) -> list[ListingEntry]:
        username = credential.username
        repository = request.repository or ""

        if request.kind is ListingKind.REPOSITORIES:
            repos = self._gateway.list_repositories(username)
            logger.debug("Listed %d repositories of %s", len(repos), username)
            return [repository_entry(repo, self._icons) for repo in repos]

        if request.kind is ListingKind.TAGS:
            tags = self._gateway.list_tags(username, repository)
            logger.debug("Listed %d tags of %s/%s", len(tags), username, repository)
            return [tag_entry(tag, repository, self._icons) for tag in tags]

        if request.kind is ListingKind.BRANCHES:
            branches = self._gateway.list_branches(username, repository)
            logger.debug("Listed %d branches of %s/%s", len(branches), username, repository)
            return [
                branch_entry(branch, username, repository, self._gateway.api_base, self._icons)
                for branch in branches
            ]

        if request.kind is ListingKind.META_FOLDERS:
            return meta_folders(repository, self._features, self._icons)

        return []
