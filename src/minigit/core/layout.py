"""On-disk layout of a repository's ``.git`` metadata directory.

``RepositoryLayout`` is a pure value: it only joins fixed suffixes onto
``base_dir`` and never touches the filesystem.  Existence checks are the
caller's job.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

GIT_DIR_NAME = ".git"


@dataclass(frozen=True)
class RepositoryLayout:
    """Well-known paths of a repository rooted at ``base_dir``.

    Path table
    ~~~~~~~~~~
    git_dir      .git
    head         .git/HEAD
    description  .git/description
    config       .git/config
    refs         .git/refs
    heads        .git/refs/heads
    tags         .git/refs/tags
    objects      .git/objects
    info         .git/objects/info
    pack         .git/objects/pack
    """

    base_dir: Path

    def __post_init__(self) -> None:
        if not isinstance(self.base_dir, Path):
            object.__setattr__(self, "base_dir", Path(os.fspath(self.base_dir)))

    @property
    def git_dir(self) -> Path:
        return self.base_dir / GIT_DIR_NAME

    @property
    def head(self) -> Path:
        return self.git_dir / "HEAD"

    @property
    def description(self) -> Path:
        return self.git_dir / "description"

    @property
    def config(self) -> Path:
        """The repository-local config file (created empty, never parsed)."""
        return self.git_dir / "config"

    @property
    def refs(self) -> Path:
        return self.git_dir / "refs"

    @property
    def heads(self) -> Path:
        return self.refs / "heads"

    @property
    def tags(self) -> Path:
        return self.refs / "tags"

    @property
    def objects(self) -> Path:
        return self.git_dir / "objects"

    @property
    def info(self) -> Path:
        return self.objects / "info"

    @property
    def pack(self) -> Path:
        return self.objects / "pack"

    def branch_ref(self, name: str) -> Path:
        """Path of the loose ref for branch ``name`` (not resolved or read)."""
        return self.heads / name

    def tag_ref(self, name: str) -> Path:
        return self.tags / name

    def directories(self) -> tuple[Path, ...]:
        """Leaf directories an initialized repository must contain."""
        return (self.heads, self.tags, self.info, self.pack)
