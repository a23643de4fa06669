"""Pydantic request / response DTOs for the API boundary.

Field names follow the host picker's listing format (``shorttitle``,
``dynload``, ``list`` …) so responses can be handed to it unchanged.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from github_picker.domain.entities import (
    Capabilities,
    DownloadedFile,
    ListingEntry,
    ListingResult,
    LoginForm,
    ReturnType,
)


class LoginFieldSchema(BaseModel):
    label: str
    type: str
    name: str
    value: str


class LoginFormResponse(BaseModel):
    """Login form descriptor: ``{"login": [field, ...]}``."""

    login: list[LoginFieldSchema]

    @classmethod
    def from_domain(cls, form: LoginForm) -> LoginFormResponse:
        return cls(
            login=[
                LoginFieldSchema(label=f.label, type=f.type, name=f.name, value=f.value)
                for f in form.fields
            ]
        )


class LoginResponse(BaseModel):
    logged_in: bool
    login: list[LoginFieldSchema] | None = None


class ListingEntrySchema(BaseModel):
    """One row of a listing, in the host picker's vocabulary."""

    title: str
    kind: str
    path: str | None = None
    source: str | None = None
    size: int | None = None
    date: int | None = None
    url: str | None = None
    shorttitle: str | None = None
    thumbnail: str | None = None
    children: list[ListingEntrySchema] | None = None

    @classmethod
    def from_domain(cls, entry: ListingEntry) -> ListingEntrySchema:
        return cls(
            title=entry.title,
            kind=entry.kind.value,
            path=entry.path,
            source=entry.source,
            size=entry.size,
            date=int(entry.modified_at.timestamp()) if entry.modified_at else None,
            url=entry.metadata_url,
            shorttitle=entry.short_title,
            thumbnail=entry.thumbnail,
            children=[] if entry.children is not None else None,
        )


class BreadcrumbSchema(BaseModel):
    name: str
    path: str


class ListingResponse(BaseModel):
    """Successful response from ``GET /listing``."""

    model_config = ConfigDict(populate_by_name=True)

    dynload: bool
    nosearch: bool
    logouttext: str
    path: list[BreadcrumbSchema]
    entries: list[ListingEntrySchema] = Field(alias="list")

    @classmethod
    def from_domain(cls, result: ListingResult) -> ListingResponse:
        return cls(
            dynload=result.dynload,
            nosearch=result.nosearch,
            logouttext=result.logout_text,
            path=[BreadcrumbSchema(name=c.name, path=c.path) for c in result.breadcrumbs],
            entries=[ListingEntrySchema.from_domain(e) for e in result.entries],
        )


class FileRequest(BaseModel):
    """Request body for ``POST /file``."""

    url: str
    filename: str = ""


class FileResponse(BaseModel):
    path: str
    url: str

    @classmethod
    def from_domain(cls, downloaded: DownloadedFile) -> FileResponse:
        return cls(path=downloaded.path, url=downloaded.url)


class CapabilitiesResponse(BaseModel):
    filetypes: list[str]
    returntypes: int
    internal: bool
    external: bool

    @classmethod
    def from_domain(cls, caps: Capabilities) -> CapabilitiesResponse:
        return cls(
            filetypes=caps.filetypes,
            returntypes=int(caps.return_types),
            internal=bool(caps.return_types & ReturnType.INTERNAL),
            external=bool(caps.return_types & ReturnType.EXTERNAL),
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
