from __future__ import annotations

import getpass
import logging
import os
import platform
import socket
from pathlib import Path
from typing import Callable, Mapping, Optional

from .command import CommandError, Runner, run_cmd, which

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> Optional[str]:
    try:
        txt = path.read_text(encoding="utf-8", errors="ignore").strip()
        return txt or None
    except OSError:
        return None


def os_release(*, run: Runner = run_cmd, which_fn: Callable[[str], Optional[str]] = which) -> str:
    """Distribution description: ``lsb_release -a`` when present, else /etc/os-release."""

    if which_fn("lsb_release"):
        try:
            out = run(["lsb_release", "-a"]).stdout.strip()
            if out:
                return out
        except (CommandError, FileNotFoundError):
            logger.debug("lsb_release failed; falling back to /etc/os-release")
    return _read_text(Path("/etc/os-release")) or "unknown"


def kernel_version() -> str:
    return platform.release()


def hostname() -> str:
    return socket.gethostname()


def current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        # No login name and no passwd entry (minimal containers).
        return str(os.getuid())


def sudo_user(environ: Mapping[str, str] = os.environ) -> Optional[str]:
    return environ.get("SUDO_USER") or None


def effective_uid() -> int:
    return os.geteuid()
