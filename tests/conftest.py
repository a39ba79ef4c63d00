"""Shared fixtures for the minigit test suite."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from minigit.core.layout import RepositoryLayout


def snapshot_tree(root: Path) -> dict[str, bytes | None]:
    """Map every entry under ``root`` to its bytes (``None`` for directories)."""
    return {
        p.relative_to(root).as_posix(): (p.read_bytes() if p.is_file() else None)
        for p in sorted(root.rglob("*"))
    }


@pytest.fixture
def snapshot():
    """The ``snapshot_tree`` helper, for comparing filesystem states."""
    return snapshot_tree


@pytest.fixture
def layout(tmp_path: Path) -> RepositoryLayout:
    """Layout rooted at an empty temporary directory."""
    return RepositoryLayout(tmp_path)


@pytest.fixture
def nested_repo(tmp_path: Path) -> Path:
    """``a/.git`` exists; returns ``a/b/c`` which has no ``.git`` of its own."""
    (tmp_path / "a" / ".git").mkdir(parents=True)
    deep = tmp_path / "a" / "b" / "c"
    deep.mkdir(parents=True)
    return deep


@pytest.fixture
def outside_any_repo(tmp_path: Path) -> Path:
    """A directory with no ``.git`` anywhere in its ancestor chain."""
    for parent in (tmp_path, *tmp_path.parents):
        if (parent / ".git").exists():
            pytest.skip(f"temporary directory is inside a repository at {parent}")
    return tmp_path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by ``setup_logging`` so streams never leak between tests."""
    yield
    package_logger = logging.getLogger("minigit")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
