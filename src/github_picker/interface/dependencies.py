"""FastAPI dependency injection wiring."""

from __future__ import annotations

from functools import lru_cache

import httpx
from fastapi import Header

from github_picker.infrastructure.config import Settings, get_settings
from github_picker.infrastructure.github_rest_adapter import GitHubRestAdapter
from github_picker.infrastructure.preference_store import InMemoryPreferenceStore
from github_picker.infrastructure.presentation import EnglishStrings, StaticIconResolver
from github_picker.infrastructure.staging import StagingArea
from github_picker.infrastructure.zipball_downloader import ZipballDownloader
from github_picker.services.credential_resolver import CredentialResolver
from github_picker.services.listing_adapter import ListingAdapter
from github_picker.services.repository_browser import RepositoryBrowser

_http_client: httpx.Client | None = None
_preferences: InMemoryPreferenceStore | None = None


def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _preferences  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.Client(timeout=httpx.Timeout(settings.request_timeout))
    if _preferences is None:
        _preferences = InMemoryPreferenceStore()


def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        _http_client.close()
        _http_client = None


@lru_cache(maxsize=1)
def _settings() -> Settings:
    return get_settings()


def get_browser(x_host_user: str = Header(...)) -> RepositoryBrowser:
    """Build a browser for the host user named in the ``X-Host-User`` header."""
    settings = _settings()

    assert _http_client is not None, "startup() was not called"
    assert _preferences is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    gateway = GitHubRestAdapter(client=_http_client, token=token, api_base=settings.api_base)
    strings = EnglishStrings()
    icons = StaticIconResolver(settings.icon_base_url)

    return RepositoryBrowser(
        resolver=CredentialResolver(gateway, _preferences.for_user(x_host_user), strings),
        listing=ListingAdapter(gateway, icons, settings.features),
        downloader=ZipballDownloader(_http_client, max_redirects=settings.max_redirects),
        staging=StagingArea(settings.staging_dir),
        strings=strings,
        validate_login=settings.validate_login,
    )
