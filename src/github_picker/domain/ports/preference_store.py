"""Port: per-user preference store owned by the host."""

from __future__ import annotations

from typing import Protocol


class PreferenceStore(Protocol):
    """Single-key string preferences of the current host user."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def unset(self, key: str) -> None:
        ...
