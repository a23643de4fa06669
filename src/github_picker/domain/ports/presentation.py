"""Ports: icon and string lookups provided by the host."""

from __future__ import annotations

from typing import Protocol


class IconResolver(Protocol):
    """Turns entry kinds into thumbnail URLs."""

    def folder_icon(self) -> str:
        """Return the thumbnail URL for folders."""
        ...

    def file_icon(self, filename: str) -> str:
        """Return the thumbnail URL for a file, chosen by extension."""
        ...


class StringTable(Protocol):
    """Localised labels."""

    def get(self, key: str, arg: str | None = None) -> str:
        """Return the string for *key*, substituting ``{a}`` with *arg*."""
        ...
