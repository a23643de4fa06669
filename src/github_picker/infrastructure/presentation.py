"""Default icon and string providers used when no host supplies its own."""

from __future__ import annotations

from pathlib import PurePosixPath

_ENGLISH: dict[str, str] = {
    "branches": "Branches",
    "currentuser": "github user: {a}",
    "repos": "Repositories",
    "tags": "Tags",
    "username": "GitHub username:",
}


class EnglishStrings:
    """StringTable holding the plugin's English labels."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._strings = {**_ENGLISH, **(overrides or {})}

    def get(self, key: str, arg: str | None = None) -> str:
        text = self._strings.get(key, f"[[{key}]]")
        if arg is not None:
            text = text.replace("{a}", arg)
        return text


class StaticIconResolver:
    """IconResolver serving 90px icons from a fixed base URL."""

    def __init__(self, base_url: str = "/pix/f", size: int = 90) -> None:
        self._base_url = base_url.rstrip("/")
        self._size = size

    def folder_icon(self) -> str:
        return f"{self._base_url}/folder-{self._size}.png"

    def file_icon(self, filename: str) -> str:
        ext = PurePosixPath(filename).suffix.lstrip(".").lower() or "unknown"
        return f"{self._base_url}/{ext}-{self._size}.png"
