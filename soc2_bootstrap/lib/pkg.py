from __future__ import annotations

import logging
from typing import Sequence

from ..errors import PackageManagerError
from .command import CmdResult, CommandError, Runner, run_cmd

logger = logging.getLogger(__name__)

NONINTERACTIVE_ENV = {"DEBIAN_FRONTEND": "noninteractive"}


def _apt(argv: Sequence[str], *, run: Runner) -> CmdResult:
    try:
        return run(argv, env=NONINTERACTIVE_ENV)
    except CommandError as e:
        raise PackageManagerError(str(e)) from e
    except FileNotFoundError as e:
        raise PackageManagerError(f"{argv[0]} is not available on this host") from e


def apt_update(*, run: Runner = run_cmd) -> None:
    _apt(["apt-get", "update"], run=run)


def apt_upgrade(*, dist_upgrade: bool = False, run: Runner = run_cmd) -> None:
    verb = "dist-upgrade" if dist_upgrade else "upgrade"
    _apt(["apt-get", verb, "-y"], run=run)


def apt_install(packages: Sequence[str], *, run: Runner = run_cmd) -> None:
    if not packages:
        return
    _apt(["apt-get", "install", "-y", *packages], run=run)


def add_apt_repository(source: str, *, run: Runner = run_cmd) -> None:
    """Add a third-party package source (e.g. ``ppa:ansible/ansible``) and refresh."""

    _apt(["add-apt-repository", "--yes", "--update", source], run=run)
    logger.info("Added package source %s", source)
