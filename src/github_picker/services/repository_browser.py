"""Repository browser — the operations the host file picker calls.

This is the single entry point for the picker logic.  It depends only on
the ports and the pure service modules; the interface layer injects
concrete adapters per request.  Nothing raises out of here: upstream and
download problems become empty listings or ``None``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from github_picker.domain.entities import (
    Breadcrumb,
    Capabilities,
    DownloadedFile,
    ListingEntry,
    ListingResult,
    LoginForm,
    ReturnType,
)
from github_picker.domain.exceptions import InvalidFilenameError, UpstreamFailure
from github_picker.domain.ports.presentation import StringTable
from github_picker.domain.value_objects import (
    BRANCHES_SEGMENT,
    TAGS_SEGMENT,
    ListingKind,
    VirtualPath,
)
from github_picker.services.credential_resolver import CredentialResolver
from github_picker.services.listing_adapter import ListingAdapter
from github_picker.services.path_router import route

logger = logging.getLogger(__name__)

SUPPORTED_FILETYPES = ["application/zip"]


class Downloader(Protocol):
    def download(self, source_url: str, destination: str) -> DownloadedFile | None:
        ...


class Stager(Protocol):
    def prepare_file(self, filename: str) -> Path:
        ...

    def discard(self, path: Path) -> None:
        ...


class RepositoryBrowser:
    """Facade over login, listing and download for one host user.

    Parameters
    ----------
    resolver:
        Resolves and remembers the GitHub username.
    listing:
        Fetches and normalises listings.
    downloader:
        Streams zipballs to local paths.
    staging:
        Turns a requested filename into a local path.
    strings:
        Labels for breadcrumbs and the logout text.
    validate_login:
        Check usernames against the GitHub API before accepting them.
    """

    def __init__(
        self,
        resolver: CredentialResolver,
        listing: ListingAdapter,
        downloader: Downloader,
        staging: Stager,
        strings: StringTable,
        validate_login: bool = True,
    ) -> None:
        self._resolver = resolver
        self._listing = listing
        self._downloader = downloader
        self._staging = staging
        self._strings = strings
        self._validate = validate_login

    # ── Login ───────────────────────────────────────────────────────────

    def check_login(self, submitted: str | None = None) -> bool:
        return self._resolver.check_login(submitted, validate=self._validate)

    def print_login(self) -> LoginForm:
        return self._resolver.login_form()

    def logout(self) -> LoginForm:
        return self._resolver.logout()

    # ── Listing ─────────────────────────────────────────────────────────

    def get_listing(self, path: str = "", page: str = "") -> ListingResult:
        """List the folder at *path*.  ``page`` is accepted but unused."""
        vpath = VirtualPath.parse(path)
        request = route(vpath, self._listing.features)
        credential = self._resolver.credential
        username = credential.username if credential else ""

        entries: list[ListingEntry] = []
        if credential is None:
            logger.warning("Listing %r requested without a GitHub username", path)
        else:
            try:
                entries = self._listing.fetch(request, credential)
            except UpstreamFailure as exc:
                logger.warning("Listing %r for %s failed: %s", path, username, exc.reason)
                if request.kind is ListingKind.REPOSITORIES:
                    self._resolver.forget()

        return ListingResult(
            entries=entries,
            breadcrumbs=self._breadcrumbs(vpath, request.kind),
            logout_text=self._strings.get("currentuser", username),
        )

    def _breadcrumbs(self, vpath: VirtualPath, kind: ListingKind) -> list[Breadcrumb]:
        crumbs = [Breadcrumb(name=self._strings.get("repos"), path="")]
        repository = vpath.repository
        if repository is None:
            return crumbs

        crumbs.append(Breadcrumb(name=repository, path=repository))
        if vpath.folder == TAGS_SEGMENT and kind is ListingKind.TAGS:
            crumbs.append(
                Breadcrumb(name=self._strings.get("tags"), path=f"{repository}/{TAGS_SEGMENT}")
            )
        elif vpath.folder == BRANCHES_SEGMENT and kind is ListingKind.BRANCHES:
            crumbs.append(
                Breadcrumb(
                    name=self._strings.get("branches"),
                    path=f"{repository}/{BRANCHES_SEGMENT}",
                )
            )
        return crumbs

    # ── Download ────────────────────────────────────────────────────────

    def get_file(self, url: str, filename: str = "") -> DownloadedFile | None:
        """Download *url* into a fresh staging path named *filename*."""
        try:
            path = self._staging.prepare_file(filename or url.rsplit("/", 1)[-1])
        except InvalidFilenameError as exc:
            logger.warning("Refusing to stage %s: %s", url, exc)
            return None
        except OSError as exc:
            logger.error("Staging area unavailable for %s: %s", url, exc)
            return None
        downloaded = self._downloader.download(url, str(path))
        if downloaded is None:
            self._staging.discard(path)
        return downloaded

    # ── Capabilities ────────────────────────────────────────────────────

    def supported_filetypes(self) -> list[str]:
        return list(SUPPORTED_FILETYPES)

    def supported_returntypes(self) -> ReturnType:
        return ReturnType.INTERNAL | ReturnType.EXTERNAL

    def capabilities(self) -> Capabilities:
        return Capabilities(
            filetypes=self.supported_filetypes(),
            return_types=self.supported_returntypes(),
        )
