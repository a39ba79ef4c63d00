"""Creation of a fresh (or resumption of a partial) repository skeleton.

Produces, relative to the repository root::

    .git/
      HEAD            ref: refs/heads/main
      description     placeholder text ending in a newline
      config          empty
      refs/heads/  refs/tags/
      objects/info/  objects/pack/

Every step is idempotent.  Directories are created with ``exist_ok`` and
files only when absent, so running this again on an existing or half-built
repository fills in what is missing and leaves everything else alone.
There is no rollback: after a failure the same call can simply be retried.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import InitConfig, Settings
from .errors import IoFailureError
from .file_io import ensure_directory, write_if_absent
from .layout import RepositoryLayout
from .locator import absolute_start

logger = logging.getLogger(__name__)


def initialize_repository(
    layout: RepositoryLayout,
    settings: Settings | None = None,
) -> None:
    """Create the directories and default files of ``layout``.

    ``layout.base_dir`` does not need to exist yet.

    Raises:
        IoFailureError: wraps the first ``OSError`` hit; later steps are
            not attempted.
    """
    init_cfg = settings.init if settings is not None else InitConfig()

    created: list[Path] = []
    for directory in layout.directories():
        try:
            if ensure_directory(directory):
                created.append(directory)
        except OSError as exc:
            raise IoFailureError(exc, directory) from exc

    files = (
        (layout.head, init_cfg.head_contents),
        (layout.description, init_cfg.description.encode()),
        (layout.config, b""),
    )
    for path, data in files:
        try:
            if write_if_absent(path, data):
                created.append(path)
        except OSError as exc:
            raise IoFailureError(exc, path) from exc

    logger.info(
        "Initialized repository skeleton at %s (%d new entries)",
        layout.git_dir,
        len(created),
    )


def init_repository(
    path: str | os.PathLike[str] | None = None,
    settings: Settings | None = None,
) -> RepositoryLayout:
    """Initialize a repository rooted at ``path`` (default: the cwd).

    The path is made absolute but not required to exist or be a repository.
    """
    layout = RepositoryLayout(absolute_start(path))
    initialize_repository(layout, settings)
    return layout
