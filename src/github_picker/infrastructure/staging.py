"""Staging area — local paths where picked files are downloaded to."""

from __future__ import annotations

import logging
import re
import tempfile
from pathlib import Path, PurePosixPath

from github_picker.domain.exceptions import InvalidFilenameError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r'[<>:"\\|?*\x00-\x1f]')


def sanitize_filename(name: str) -> str:
    """Reduce *name* to a bare file name with no path or reserved characters."""
    base = PurePosixPath(name.replace("\\", "/")).name
    base = _UNSAFE_CHARS.sub("_", base).strip()
    if base in ("", ".", ".."):
        raise InvalidFilenameError(f"Cannot stage a file named {name!r}")
    return base


class StagingArea:
    """Hands out a fresh directory per download under *root*."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def prepare_file(self, filename: str) -> Path:
        """Return a writable path for *filename* inside a new unique directory."""
        safe = sanitize_filename(filename)
        self._root.mkdir(parents=True, exist_ok=True)
        directory = Path(tempfile.mkdtemp(prefix="zipball-", dir=self._root))
        path = directory / safe
        logger.debug("Staging %s at %s", filename, path)
        return path

    def discard(self, path: Path) -> None:
        """Remove *path* and the directory :meth:`prepare_file` made for it."""
        path.unlink(missing_ok=True)
        try:
            path.parent.rmdir()
        except OSError as exc:
            logger.warning("Could not remove staging directory %s: %s", path.parent, exc)
