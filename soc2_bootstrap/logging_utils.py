from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO, Tuple

from .lib.fsutil import ensure_dir

LOGGER_NAME = "soc2_bootstrap"
LOG_DIR_MODE = 0o750
STAMP_FORMAT = "%Y%m%d_%H%M%S"

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def stamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now()).strftime(STAMP_FORMAT)


def create_log_file(log_dir: Path, prefix: str, *, now: Optional[datetime] = None) -> Path:
    """Create a fresh, uniquely named run log.

    Names carry a second-resolution timestamp. The file is created with
    O_EXCL; when another run already claimed the name within the same second
    a numeric suffix is added instead of sharing the file.
    """

    base = f"{prefix}_{stamp(now)}"
    n = 0
    while True:
        name = f"{base}.log" if n == 0 else f"{base}_{n}.log"
        path = log_dir / name
        try:
            with open(path, "x", encoding="utf-8"):
                return path
        except FileExistsError:
            n += 1


def configure_logging(
    log_dir: Path,
    prefix: str,
    *,
    level: int = logging.INFO,
    console: Optional[TextIO] = None,
    now: Optional[datetime] = None,
) -> Tuple[logging.Logger, Path]:
    """Configure the run logger.

    Every record goes to the run log and to the console. Handlers installed
    by an earlier call are closed and replaced, so reconfiguring never
    duplicates output. Returns the logger and the log file path.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    close_logging(logger)

    ensure_dir(log_dir, LOG_DIR_MODE)
    log_path = create_log_file(log_dir, prefix, now=now)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setFormatter(fmt)
    console_handler = logging.StreamHandler(console or sys.stdout)
    console_handler.setFormatter(fmt)

    for h in (file_handler, console_handler):
        setattr(h, "_soc2_handler", True)
        logger.addHandler(h)

    logger.debug("Logging initialized (log=%s)", log_path)
    return logger, log_path


def close_logging(logger: Optional[logging.Logger] = None) -> None:
    logger = logger or logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        if getattr(h, "_soc2_handler", False):
            logger.removeHandler(h)
            h.close()
