from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from .lib.command import Runner
from .lib.env import Paths
from .prompts import CredentialProvider
from .variants import Variant


@dataclass(frozen=True)
class SessionContext:
    started_at: datetime
    invoking_user: str
    effective_uid: int
    sudo_user: Optional[str]
    hostname: str
    kernel_version: str
    os_release: str
    log_file: Path


@dataclass(frozen=True)
class Options:
    dist_upgrade: bool = False
    host_key_policy: str = "no"


@dataclass
class RunState:
    """What the run decided or produced; read by later steps and the report."""

    commit_name: Optional[str] = None
    commit_email: Optional[str] = None
    repo_url: Optional[str] = None
    tool_version: Optional[str] = None
    deploy_key: Optional[Path] = None
    ssh_config_backup: Optional[Path] = None
    clone_skipped: bool = False
    warnings: List[str] = field(default_factory=list)


@dataclass
class BootstrapCtx:
    variant: Variant
    paths: Paths
    session: SessionContext
    log: logging.Logger
    provider: CredentialProvider
    run: Runner
    which: Callable[[str], Optional[str]]
    options: Options = field(default_factory=Options)
    state: RunState = field(default_factory=RunState)

    @property
    def deploy_key_path(self) -> Path:
        return self.paths.deploy_key(self.variant.deploy_key_file)

    def stamp(self) -> str:
        return datetime.now().strftime("%Y%m%d_%H%M%S")
