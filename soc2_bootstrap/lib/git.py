from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..errors import StepFailure
from .command import CommandError, Runner, run_cmd

logger = logging.getLogger(__name__)


def git_config_global(key: str, value: str, *, run: Runner = run_cmd) -> None:
    try:
        run(["git", "config", "--global", key, value])
    except (CommandError, FileNotFoundError) as e:
        raise StepFailure(f"git config --global {key} failed: {e}") from e


def git_clone(url: str, dest: Path, *, run: Runner = run_cmd) -> bool:
    """Clone ``url`` into ``dest``. Returns False when git exits non-zero."""

    r = run(["git", "clone", url, str(dest)], check=False)
    if r.returncode != 0:
        logger.debug("git clone exited %s: %s", r.returncode, r.stderr.strip())
    return r.returncode == 0


def git_origin_url(repo: Path, *, run: Runner = run_cmd) -> Optional[str]:
    """Best-effort lookup of ``remote.origin.url`` for an existing checkout."""

    if not (repo / ".git").exists():
        return None
    r = run(["git", "-C", str(repo), "config", "--get", "remote.origin.url"], check=False)
    if r.returncode != 0:
        return None
    return r.stdout.strip() or None
