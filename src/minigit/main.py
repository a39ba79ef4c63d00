"""Application bootstrap.

Loads settings, configures logging and runs one repository operation.
Both entry points return plain values and let ``GitError`` propagate;
turning errors into user-facing output is the CLI's job.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from .core.config import Settings, load_settings
from .core.initializer import init_repository
from .core.layout import RepositoryLayout
from .core.locator import absolute_start, contains_git_dir, locate_repository
from .observability.logger import get_logger, new_run_id, setup_logging

logger = get_logger(__name__)


@dataclass(frozen=True)
class InitOutcome:
    layout: RepositoryLayout
    reinitialized: bool


def _bootstrap(
    config_path: str | None,
    overrides: dict[str, Any] | None,
) -> Settings:
    settings = load_settings(config_path=config_path, overrides=overrides)
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )
    new_run_id()
    return settings


def run_init(
    path: str | os.PathLike[str] | None = None,
    config_path: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> InitOutcome:
    """Initialize a repository at ``path`` (default: cwd)."""
    settings = _bootstrap(config_path, overrides)

    target = absolute_start(path)
    reinitialized = contains_git_dir(target)
    logger.info("init", path=str(target), reinitialized=reinitialized)

    layout = init_repository(target, settings)
    return InitOutcome(layout=layout, reinitialized=reinitialized)


def run_locate(
    path: str | os.PathLike[str] | None = None,
    config_path: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> RepositoryLayout:
    """Locate the repository enclosing ``path`` (default: cwd)."""
    _bootstrap(config_path, overrides)

    layout = locate_repository(path)
    logger.info("located", root=str(layout.base_dir))
    return layout
