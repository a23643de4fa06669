"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_USERNAME_RE = re.compile(r"^[A-Za-z0-9_\-]+$")

TAGS_SEGMENT = "tags"
BRANCHES_SEGMENT = "branches"


def clean_username(value: str | None) -> str:
    """Return *value* stripped, or ``""`` if it holds anything but ``[A-Za-z0-9_-]``."""
    if not value:
        return ""
    value = value.strip()
    if not _USERNAME_RE.match(value):
        return ""
    return value


@dataclass(frozen=True, slots=True)
class Credential:
    """The GitHub account being browsed."""

    username: str

    def __post_init__(self) -> None:
        if not self.username:
            raise ValueError("Credential requires a non-empty username")


@dataclass(frozen=True, slots=True)
class VirtualPath:
    """Navigation path inside the synthetic picker hierarchy.

    ``()`` is the root, ``("demo",)`` a repository and
    ``("demo", "tags")`` one of its meta-folders.
    """

    segments: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: str | None) -> VirtualPath:
        """Split a ``/``-joined host path, ignoring empty segments."""
        if not raw:
            return cls()
        return cls(tuple(part for part in raw.split("/") if part))

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def repository(self) -> str | None:
        return self.segments[0] if self.segments else None

    @property
    def folder(self) -> str | None:
        return self.segments[1] if len(self.segments) > 1 else None

    def __str__(self) -> str:
        return "/".join(self.segments)


class ListingKind(str, Enum):
    """What a routed path asks for."""

    REPOSITORIES = "repositories"
    META_FOLDERS = "meta_folders"
    TAGS = "tags"
    BRANCHES = "branches"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class ListingRequest:
    """Outcome of routing a :class:`VirtualPath`."""

    kind: ListingKind
    repository: str | None = None

    @property
    def needs_network(self) -> bool:
        return self.kind in (ListingKind.REPOSITORIES, ListingKind.TAGS, ListingKind.BRANCHES)


@dataclass(frozen=True, slots=True)
class ListingFeatures:
    """Variant switches of the picker.

    The plain tag downloader is ``ListingFeatures(include_branches=False,
    include_meta_folders=False)``: a repository opens straight onto its tags.
    """

    include_branches: bool = True
    include_meta_folders: bool = True
