"""Non-destructive file creation helpers.

Repository metadata files are only ever written when absent, so
re-initializing a repository never clobbers a HEAD that already points
somewhere else.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def write_if_absent(path: Path, data: bytes) -> bool:
    """Create ``path`` containing ``data`` unless it already exists.

    * The existence check comes first; an existing file (of any content,
      including empty) is left untouched and ``False`` is returned.  A
      symlink counts as present even when its target does not exist, so
      nothing is ever written through it.
    * The data is flushed and ``fsync``-ed before returning ``True``.
    * The caller is responsible for creating parent directories.
    """
    if path.exists() or path.is_symlink():
        logger.debug("Keeping existing %s", path)
        return False

    with open(path, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    logger.debug("Created %s (%d bytes)", path, len(data))
    return True


def ensure_directory(path: Path) -> bool:
    """Create ``path`` and any missing parents. Returns ``True`` if it was new."""
    existed = path.is_dir()
    path.mkdir(parents=True, exist_ok=True)
    if not existed:
        logger.debug("Created directory %s", path)
    return not existed
