from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_LOG_DIR = "/var/log/soc2_setup"


@dataclass(frozen=True)
class Paths:
    """Filesystem roots touched by a run.

    Everything under the operator's home (``~/.ssh``) is derived from
    ``home``; clone destinations come from the variant manifest.
    """

    log_dir: Path = Path(DEFAULT_LOG_DIR)
    home: Path = field(default_factory=Path.home)

    @property
    def ssh_dir(self) -> Path:
        return self.home / ".ssh"

    @property
    def ssh_config(self) -> Path:
        return self.ssh_dir / "config"

    def deploy_key(self, file_name: str) -> Path:
        return self.ssh_dir / file_name
