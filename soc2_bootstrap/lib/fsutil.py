from __future__ import annotations

import logging
import os
import shutil
import stat
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def ensure_dir(path: Path, mode: int) -> Path:
    """Create ``path`` if needed and force ``mode`` on it (umask independent)."""

    path.mkdir(mode=mode, parents=True, exist_ok=True)
    os.chmod(path, mode)
    return path


def write_private_file(path: Path, content: str, mode: int = 0o600) -> None:
    """Write ``content`` in one go; the file never exists with wider permissions."""

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    # O_CREAT mode is masked by umask and ignored for existing files.
    os.fchmod(fd, mode)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(content)


def next_free_path(path: Path) -> Path:
    """Return ``path`` or the first ``<path>_<n>`` that does not exist yet."""

    if not path.exists():
        return path
    n = 1
    while True:
        candidate = path.with_name(f"{path.name}_{n}")
        if not candidate.exists():
            return candidate
        n += 1


def backup_file(path: Path, stamp: str) -> Path:
    """Copy ``path`` byte-for-byte to ``<path>.bak.<stamp>``; never overwrites."""

    dst = next_free_path(path.with_name(f"{path.name}.bak.{stamp}"))
    shutil.copy2(path, dst)
    return dst


def _iter_files(root: Path, pattern: str) -> Iterable[Path]:
    for p in sorted(root.rglob(pattern)):
        if p.is_file() and not p.is_symlink():
            yield p


def mark_executable(root: Path, pattern: str = "*.sh") -> int:
    """chmod +x every file matching ``pattern`` under ``root``.

    A missing ``root`` is not an error; returns the number of files touched.
    """

    if not root.is_dir():
        logger.info("Skipping %s (not present)", root)
        return 0
    count = 0
    for p in _iter_files(root, pattern):
        p.chmod(p.stat().st_mode | EXEC_BITS)
        count += 1
    return count


def chmod_matching(root: Path, pattern: str, mode: int) -> int:
    count = 0
    for p in _iter_files(root, pattern):
        p.chmod(mode)
        count += 1
    return count


def touch_protected(path: Path, mode: int, *, owner: Optional[str] = None, group: Optional[str] = None) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(exist_ok=True)
    os.chmod(path, mode)
    if owner or group:
        shutil.chown(path, user=owner, group=group)
