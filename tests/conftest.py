"""Shared pytest fixtures: a scripted GitHub behind ``httpx.MockTransport``."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from github_picker.infrastructure.github_rest_adapter import GitHubRestAdapter
from github_picker.infrastructure.preference_store import InMemoryPreferenceStore, UserPreferences
from github_picker.infrastructure.presentation import EnglishStrings, StaticIconResolver
from github_picker.infrastructure.staging import StagingArea
from github_picker.infrastructure.zipball_downloader import ZipballDownloader
from github_picker.services.credential_resolver import CredentialResolver
from github_picker.services.listing_adapter import ListingAdapter
from github_picker.services.repository_browser import RepositoryBrowser

API = "https://api.github.com"

Responder = Callable[[httpx.Request], httpx.Response]


class FakeGitHub:
    """Answers requests by URL path; unknown paths get a 404."""

    def __init__(self) -> None:
        self._routes: dict[str, Responder] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        path: str,
        status: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if json is not None:
                return httpx.Response(status, json=json, headers=headers)
            return httpx.Response(status, content=content or b"", headers=headers)

        self._routes[path] = respond

    def add_error(self, path: str) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self._routes[path] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        respond = self._routes.get(request.url.path)
        if respond is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return respond(request)

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def http_client(github: FakeGitHub):
    client = httpx.Client(transport=httpx.MockTransport(github.handler))
    yield client
    client.close()


@pytest.fixture
def gateway(http_client: httpx.Client) -> GitHubRestAdapter:
    return GitHubRestAdapter(client=http_client, api_base=API)


@pytest.fixture
def preferences() -> UserPreferences:
    return InMemoryPreferenceStore().for_user("user-1")


@pytest.fixture
def strings() -> EnglishStrings:
    return EnglishStrings()


@pytest.fixture
def resolver(gateway, preferences, strings) -> CredentialResolver:
    return CredentialResolver(gateway, preferences, strings)


@pytest.fixture
def browser(gateway, resolver, http_client, strings, tmp_path) -> RepositoryBrowser:
    return RepositoryBrowser(
        resolver=resolver,
        listing=ListingAdapter(gateway, StaticIconResolver()),
        downloader=ZipballDownloader(http_client),
        staging=StagingArea(tmp_path / "staging"),
        strings=strings,
    )


@pytest.fixture
def repos_json() -> list[dict[str, Any]]:
    return [
        {
            "name": "newest",
            "updated_at": "2024-05-01T10:00:00Z",
            "size": 12,
            "description": "Most recent",
        },
        {
            "name": "older",
            "updated_at": "2023-01-15T08:30:00Z",
            "size": 3,
            "description": None,
        },
    ]


@pytest.fixture
def tags_json() -> list[dict[str, Any]]:
    return [
        {
            "name": "v1.0",
            "zipball_url": f"{API}/repos/alice/demo/zipball/refs/tags/v1.0",
            "commit": {"sha": "abc", "url": f"{API}/repos/alice/demo/commits/abc"},
        },
        {
            "name": "v0.9",
            "zipball_url": f"{API}/repos/alice/demo/zipball/refs/tags/v0.9",
            "commit": {"sha": "def", "url": f"{API}/repos/alice/demo/commits/def"},
        },
    ]


@pytest.fixture
def branches_json() -> list[dict[str, Any]]:
    return [
        {"name": "main", "commit": {"sha": "abc", "url": f"{API}/repos/alice/demo/commits/abc"}},
        {"name": "dev", "commit": {"sha": "123", "url": f"{API}/repos/alice/demo/commits/123"}},
    ]
