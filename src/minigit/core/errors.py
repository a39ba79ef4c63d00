"""Custom exception hierarchy for repository operations."""

from __future__ import annotations

from pathlib import Path


class GitError(Exception):
    """Base exception for all repository errors."""


# --- Configuration ---
class ConfigError(GitError):
    """Invalid or unreadable tool configuration."""


# --- Discovery ---
class NotARepositoryError(GitError):
    """No ``.git`` directory in the start directory or any of its parents."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"{self.path} is not a git directory.")


# --- Filesystem ---
class IoFailureError(GitError):
    """An underlying filesystem operation failed."""

    def __init__(self, cause: OSError, path: str | Path | None = None):
        self.cause = cause
        self.path = Path(path) if path is not None else None
        super().__init__(str(cause))
