"""Tests for the FastAPI surface, with GitHub replaced by a scripted transport."""

from __future__ import annotations

import pytest
from fastapi import Header
from fastapi.testclient import TestClient

from github_picker.infrastructure.preference_store import InMemoryPreferenceStore
from github_picker.infrastructure.presentation import EnglishStrings, StaticIconResolver
from github_picker.infrastructure.staging import StagingArea
from github_picker.infrastructure.zipball_downloader import ZipballDownloader
from github_picker.interface.app import create_app
from github_picker.interface.dependencies import get_browser
from github_picker.services.credential_resolver import CredentialResolver
from github_picker.services.listing_adapter import ListingAdapter
from github_picker.services.repository_browser import RepositoryBrowser

HEADERS = {"X-Host-User": "42"}


@pytest.fixture
def client(gateway, http_client, tmp_path):
    store = InMemoryPreferenceStore()
    strings = EnglishStrings()

    def browser_for(x_host_user: str = Header(...)) -> RepositoryBrowser:
        return RepositoryBrowser(
            resolver=CredentialResolver(gateway, store.for_user(x_host_user), strings),
            listing=ListingAdapter(gateway, StaticIconResolver()),
            downloader=ZipballDownloader(http_client),
            staging=StagingArea(tmp_path / "staging"),
            strings=strings,
        )

    app = create_app()
    app.dependency_overrides[get_browser] = browser_for
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_login_form(client):
    resp = client.get("/login", headers=HEADERS)
    assert resp.status_code == 200
    assert resp.json() == {
        "login": [
            {"label": "GitHub username:", "type": "text", "name": "github_username", "value": ""}
        ]
    }


def test_missing_host_user_header(client):
    resp = client.get("/login")
    assert resp.status_code == 422
    assert resp.json()["status"] == "error"


def test_listing_requires_login(client):
    resp = client.get("/listing", headers=HEADERS)
    assert resp.status_code == 401
    assert resp.json()["status"] == "error"


def test_failed_login_returns_form(client):
    resp = client.post("/login", data={"github_username": "ghost"}, headers=HEADERS)
    body = resp.json()
    assert body["logged_in"] is False
    assert body["login"][0]["name"] == "github_username"


def test_login_then_browse(github, client, repos_json, tags_json):
    github.add("/users/alice", json={"login": "alice"})
    github.add("/users/alice/repos", json=repos_json)
    github.add("/repos/alice/demo/tags", json=tags_json)

    assert client.post("/login", data={"github_username": "alice"}, headers=HEADERS).json() == {
        "logged_in": True,
        "login": None,
    }

    root = client.get("/listing", params={"path": ""}, headers=HEADERS).json()
    assert root["dynload"] is True
    assert root["nosearch"] is True
    assert root["logouttext"] == "github user: alice"
    assert root["path"] == [{"name": "Repositories", "path": ""}]
    first = root["list"][0]
    assert first["title"] == "newest"
    assert first["path"] == "newest"
    assert first["size"] == 12 * 1024
    assert first["date"] == 1714557600
    assert first["children"] == []

    tags = client.get("/listing", params={"path": "demo/tags"}, headers=HEADERS).json()
    assert [e["title"] for e in tags["list"]] == ["demo-v1.0.zip", "demo-v0.9.zip"]
    assert tags["list"][0]["source"] == tags_json[0]["zipball_url"]
    assert tags["list"][0]["url"] == tags_json[0]["commit"]["url"]


def test_username_is_per_host_user(github, client):
    github.add("/users/alice", json={"login": "alice"})
    client.post("/login", data={"github_username": "alice"}, headers=HEADERS)
    assert client.get("/listing", headers={"X-Host-User": "other"}).status_code == 401


def test_logout(github, client):
    github.add("/users/alice", json={"login": "alice"})
    client.post("/login", data={"github_username": "alice"}, headers=HEADERS)

    resp = client.post("/logout", headers=HEADERS)

    assert resp.json()["login"][0]["name"] == "github_username"
    assert client.get("/listing", headers=HEADERS).status_code == 401


def test_get_file(github, client):
    github.add("/repos/alice/demo/zipball/main", content=b"PK zip")
    url = "https://api.github.com/repos/alice/demo/zipball/main"

    body = client.post("/file", json={"url": url, "filename": "demo-main.zip"}, headers=HEADERS).json()

    assert body["url"] == url
    assert body["path"].endswith("demo-main.zip")


def test_get_file_failure_is_null(client):
    resp = client.post(
        "/file", json={"url": "https://api.github.com/nope", "filename": "x.zip"}, headers=HEADERS
    )
    assert resp.status_code == 200
    assert resp.json() is None


def test_capabilities(client):
    assert client.get("/capabilities", headers=HEADERS).json() == {
        "filetypes": ["application/zip"],
        "returntypes": 3,
        "internal": True,
        "external": True,
    }


def test_empty_login_post_without_stored_username(github, client):
    resp = client.post("/login", headers=HEADERS)

    assert resp.status_code == 200
    body = resp.json()
    assert body["logged_in"] is False
    assert [f["name"] for f in body["login"]] == ["github_username"]
    assert github.requests == []


def test_empty_login_post_uses_stored_username(github, client):
    github.add("/users/alice", json={"login": "alice"})
    client.post("/login", data={"github_username": "alice"}, headers=HEADERS)

    resp = client.post("/login", headers=HEADERS)

    assert resp.status_code == 200
    assert resp.json() == {"logged_in": True, "login": None}


def test_stored_username_wins_over_submitted_form_value(github, client):
    github.add("/users/alice", json={"login": "alice"})
    github.add("/users/bob", json={"login": "bob"})
    client.post("/login", data={"github_username": "alice"}, headers=HEADERS)

    resp = client.post("/login", data={"github_username": "bob"}, headers=HEADERS)

    assert resp.json()["logged_in"] is True
    assert "/users/bob" not in github.paths


def test_listing_documents_error_envelope(client):
    responses = client.get("/openapi.json").json()["paths"]["/listing"]["get"]["responses"]
    schema = responses["401"]["content"]["application/json"]["schema"]
    assert schema["$ref"].endswith("/ErrorResponse")
