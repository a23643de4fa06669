"""GitHub API entities decoded from JSON.

Only the fields the picker reads are declared; a missing required field is a
validation error and the whole listing is treated as an upstream failure.
"""

from datetime import datetime

from pydantic import BaseModel


class CommitRef(BaseModel):
    """Commit pointer embedded in tag and branch payloads."""

    url: str


class Repository(BaseModel):
    """Entry of ``GET /users/{user}/repos``."""

    name: str
    updated_at: datetime | None = None
    size: int = 0  # KiB, as reported by GitHub
    description: str | None = None


class Tag(BaseModel):
    """Entry of ``GET /repos/{user}/{repo}/tags``."""

    name: str
    zipball_url: str
    commit: CommitRef


class Branch(BaseModel):
    """Entry of ``GET /repos/{user}/{repo}/branches``."""

    name: str
    commit: CommitRef
