"""In-process user preference store — stands in for the host's preference table."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class InMemoryPreferenceStore:
    """Preferences of every host user, kept for the life of the process."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, dict[str, str]] = {}

    def for_user(self, user_id: str) -> UserPreferences:
        """Return a PreferenceStore view scoped to *user_id*."""
        return UserPreferences(self, user_id)

    def _get(self, user_id: str, key: str) -> str | None:
        with self._lock:
            return self._data.get(user_id, {}).get(key)

    def _set(self, user_id: str, key: str, value: str) -> None:
        with self._lock:
            self._data.setdefault(user_id, {})[key] = value

    def _unset(self, user_id: str, key: str) -> None:
        with self._lock:
            prefs = self._data.get(user_id)
            if prefs is not None:
                prefs.pop(key, None)


class UserPreferences:
    """PreferenceStore implementation bound to one host user."""

    def __init__(self, store: InMemoryPreferenceStore, user_id: str) -> None:
        self._store = store
        self._user_id = user_id

    def get(self, key: str) -> str | None:
        return self._store._get(self._user_id, key)

    def set(self, key: str, value: str) -> None:
        logger.debug("Preference %s set for user %s", key, self._user_id)
        self._store._set(self._user_id, key, value)

    def unset(self, key: str) -> None:
        logger.debug("Preference %s unset for user %s", key, self._user_id)
        self._store._unset(self._user_id, key)
