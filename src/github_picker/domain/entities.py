"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntFlag


class EntryKind(str, Enum):
    """Whether a listing entry can be navigated into or downloaded."""

    FOLDER = "folder"
    FILE = "file"


class ReturnType(IntFlag):
    """How the host may keep a picked file: a cached copy or a direct link."""

    EXTERNAL = 1
    INTERNAL = 2


@dataclass(frozen=True, slots=True)
class ListingEntry:
    """One row of a picker listing.

    Folders carry ``path`` and files carry ``source``, never both.
    """

    title: str
    kind: EntryKind
    path: str | None = None
    source: str | None = None
    size: int | None = None
    modified_at: datetime | None = None
    metadata_url: str | None = None
    short_title: str | None = None
    thumbnail: str | None = None

    def __post_init__(self) -> None:
        if self.kind is EntryKind.FOLDER and (self.path is None or self.source is not None):
            raise ValueError(f"Folder entry {self.title!r} needs a path and no source")
        if self.kind is EntryKind.FILE and (self.source is None or self.path is not None):
            raise ValueError(f"File entry {self.title!r} needs a source and no path")

    @property
    def children(self) -> list[ListingEntry] | None:
        # Folders are loaded lazily (dynload), so they are always sent empty.
        return [] if self.kind is EntryKind.FOLDER else None


@dataclass(frozen=True, slots=True)
class Breadcrumb:
    """A step of the navigation trail shown above the listing."""

    name: str
    path: str


@dataclass(frozen=True, slots=True)
class FormField:
    """A single input of the login form."""

    name: str
    label: str
    type: str = "text"
    value: str = ""


@dataclass(frozen=True, slots=True)
class LoginForm:
    """Descriptor of the login form the host renders."""

    fields: list[FormField]


@dataclass(frozen=True, slots=True)
class ListingResult:
    """Everything the host needs to render one picker page."""

    entries: list[ListingEntry]
    breadcrumbs: list[Breadcrumb]
    logout_text: str
    dynload: bool = True
    nosearch: bool = True


@dataclass(frozen=True, slots=True)
class DownloadedFile:
    """A zipball saved to local storage."""

    path: str
    url: str


@dataclass(frozen=True, slots=True)
class Capabilities:
    """Static capability flags consumed by the host picker."""

    filetypes: list[str] = field(default_factory=lambda: ["application/zip"])
    return_types: ReturnType = ReturnType.INTERNAL | ReturnType.EXTERNAL
