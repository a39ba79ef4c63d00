"""Repository discovery by walking up from a start directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import IoFailureError, NotARepositoryError
from .layout import RepositoryLayout

logger = logging.getLogger(__name__)


def absolute_start(start: str | os.PathLike[str] | None) -> Path:
    """Resolve the start directory against the cwd without following symlinks."""
    try:
        if start is None:
            return Path.cwd()
        return Path(start).absolute()
    except OSError as exc:
        raise IoFailureError(exc, start) from exc


def contains_git_dir(path: Path) -> bool:
    """True if ``path`` is a directory holding a ``.git`` entry."""
    try:
        if not path.is_dir():
            return False
        return RepositoryLayout(path).git_dir.exists()
    except OSError as exc:
        raise IoFailureError(exc, path) from exc


def find_repository_root(start: str | os.PathLike[str] | None = None) -> Path:
    """Return the nearest directory at or above ``start`` that contains ``.git``.

    The walk checks ``start`` itself first, then each parent in turn, up to
    and including the filesystem root (the point where a path is its own
    parent).

    Raises:
        NotARepositoryError: no candidate contains ``.git``; carries ``start``.
        IoFailureError: the cwd could not be determined or a probe failed.
    """
    origin = absolute_start(start)
    candidate = origin
    steps = 0
    while True:
        if contains_git_dir(candidate):
            logger.debug("Found repository root %s (%d levels up from %s)", candidate, steps, origin)
            return candidate
        parent = candidate.parent
        if parent == candidate:
            break
        candidate = parent
        steps += 1

    logger.debug("No repository found above %s", origin)
    raise NotARepositoryError(origin)


def locate_repository(start: str | os.PathLike[str] | None = None) -> RepositoryLayout:
    """Locate the enclosing repository and return its layout.

    ``start`` defaults to the current working directory.
    """
    return RepositoryLayout(find_repository_root(start))
