"""Domain exception hierarchy.

Inner layers raise these; the :class:`RepositoryBrowser` boundary absorbs
them into empty listings or ``None`` because the host's picker contract has
no error channel.  Only a handful reach the HTTP layer.
"""

from __future__ import annotations


class GitHubPickerError(Exception):
    """Base exception for the entire application."""


# ── Login ───────────────────────────────────────────────────────────────────


class AuthenticationFailure(GitHubPickerError):
    """No valid GitHub username could be resolved for the session."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class UpstreamFailure(GitHubPickerError):
    """A listing call failed (non-200, empty body, network, bad JSON)."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class DownloadFailure(GitHubPickerError):
    """A zipball transfer did not complete."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


# ── Staging ─────────────────────────────────────────────────────────────────


class InvalidFilenameError(GitHubPickerError):
    """The requested staging filename cannot be turned into a safe path."""
