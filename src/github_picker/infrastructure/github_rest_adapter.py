"""GitHub REST API adapter — implements the GitHubGateway port."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from github_picker.domain.exceptions import UpstreamFailure
from github_picker.domain.models import Branch, Repository, Tag

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"

_M = TypeVar("_M", bound=BaseModel)


class GitHubRestAdapter:
    """Concrete GitHubGateway backed by the GitHub v3 REST API.

    Every method performs exactly one request; nothing is cached or retried
    and only the first page of a listing is read.
    """

    def __init__(
        self,
        client: httpx.Client,
        token: str | None = None,
        api_base: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._api_base = api_base.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "github-picker/1.0",
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    @property
    def api_base(self) -> str:
        return self._api_base

    def user_exists(self, username: str) -> bool:
        """GET /users/{username} → True on 200 with a body."""
        try:
            self._api_get(f"/users/{username}")
        except UpstreamFailure as exc:
            logger.info("GitHub user %s not accepted: %s", username, exc.reason)
            return False
        return True

    def list_repositories(self, username: str) -> list[Repository]:
        """GET /users/{username}/repos?sort=updated → [Repository]."""
        resp = self._api_get(f"/users/{username}/repos", params={"sort": "updated"})
        return self._decode_list(resp, Repository)

    def list_tags(self, username: str, repository: str) -> list[Tag]:
        """GET /repos/{username}/{repository}/tags → [Tag]."""
        resp = self._api_get(f"/repos/{username}/{repository}/tags")
        return self._decode_list(resp, Tag)

    def list_branches(self, username: str, repository: str) -> list[Branch]:
        """GET /repos/{username}/{repository}/branches → [Branch]."""
        resp = self._api_get(f"/repos/{username}/{repository}/branches")
        return self._decode_list(resp, Branch)

    @staticmethod
    def _decode_list(resp: httpx.Response, model: type[_M]) -> list[_M]:
        try:
            data: Any = resp.json()
        except ValueError as exc:
            raise UpstreamFailure(f"Malformed JSON from {resp.request.url}") from exc

        if not isinstance(data, list):
            raise UpstreamFailure(
                f"Expected a JSON array from {resp.request.url}, got {type(data).__name__}"
            )

        try:
            return [model.model_validate(item) for item in data]
        except ValidationError as exc:
            raise UpstreamFailure(
                f"Invalid {model.__name__} payload from {resp.request.url}: "
                f"{exc.error_count()} error(s)"
            ) from exc

    def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request, raising UpstreamFailure unless 200 + body."""
        url = f"{self._api_base}{endpoint}"
        try:
            resp = self._client.get(url, headers=self._api_headers, params=params)
        except httpx.HTTPError as exc:
            raise UpstreamFailure(f"Network error fetching {url}: {exc}") from exc

        logger.debug("GET %s → HTTP %d", url, resp.status_code)

        if resp.status_code != 200:
            if resp.status_code == 403 and resp.headers.get("x-ratelimit-remaining") == "0":
                raise UpstreamFailure(f"GitHub API rate limit exceeded for {url}")
            raise UpstreamFailure(f"GitHub API returned HTTP {resp.status_code} for {url}")

        if not resp.content:
            raise UpstreamFailure(f"GitHub API returned an empty body for {url}")

        return resp
