"""Zipball downloader — streams an archive from GitHub to local storage."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import httpx

from github_picker.domain.entities import DownloadedFile
from github_picker.domain.exceptions import DownloadFailure

logger = logging.getLogger(__name__)

DEFAULT_MAX_REDIRECTS = 3
_CHUNK_SIZE = 64 * 1024


class ZipballDownloader:
    """Writes a remote zip to a path, leaving nothing behind on failure.

    Zipball URLs redirect to signed storage links; at most *max_redirects*
    hops are followed before the transfer counts as failed.
    """

    def __init__(
        self,
        client: httpx.Client,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
    ) -> None:
        self._client = client
        self._max_redirects = max_redirects
        self._headers: dict[str, str] = {"User-Agent": "github-picker/1.0"}

    def download(self, source_url: str, destination: str | Path) -> DownloadedFile | None:
        """Stream *source_url* into *destination*; ``None`` if the transfer failed."""
        path = Path(destination)
        try:
            with path.open("wb") as fh:
                written = self._transfer(source_url, fh)
        except (DownloadFailure, OSError) as exc:
            logger.warning("Download of %s failed: %s", source_url, exc)
            path.unlink(missing_ok=True)
            return None

        logger.info("Downloaded %s → %s (%d bytes)", source_url, path, written)
        return DownloadedFile(path=str(path), url=source_url)

    def _transfer(self, source_url: str, fh: BinaryIO) -> int:
        try:
            request = self._client.build_request("GET", source_url, headers=self._headers)
            resp = self._send_following_redirects(request)
            try:
                if resp.status_code != 200:
                    raise DownloadFailure(f"HTTP {resp.status_code} from {resp.url}")
                written = 0
                for chunk in resp.iter_bytes(_CHUNK_SIZE):
                    fh.write(chunk)
                    written += len(chunk)
            finally:
                resp.close()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DownloadFailure(f"Network error fetching {source_url}: {exc}") from exc

        if written == 0:
            raise DownloadFailure(f"Empty response body from {source_url}")
        return written

    def _send_following_redirects(self, request: httpx.Request) -> httpx.Response:
        """Send *request*, following up to ``max_redirects`` hops by hand.

        The client's own ``max_redirects`` is shared with the listing calls,
        so the bound is enforced here instead.
        """
        hops = 0
        while True:
            resp = self._client.send(request, stream=True, follow_redirects=False)
            if not resp.has_redirect_location:
                return resp
            resp.close()
            hops += 1
            if hops > self._max_redirects:
                raise DownloadFailure(
                    f"Exceeded {self._max_redirects} redirects, last hop {request.url}"
                )
            location = resp.headers["Location"]
            logger.debug("Redirect %d → %s", hops, location)
            request = self._client.build_request(
                "GET", request.url.join(location), headers=self._headers
            )
