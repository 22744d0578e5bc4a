from __future__ import annotations

import os
import re
from pathlib import Path

from ..context import BootstrapCtx
from ..errors import AdvisoryWarning, CloneFailure
from ..lib.fsutil import chmod_matching, mark_executable, touch_protected
from ..lib.git import git_clone, git_origin_url
from ..lib.ssh import ssh_test_command
from .step_50_configure_identity import advise

SSH_URL_RE = re.compile(r"^[\w.-]+@[\w.-]+:\S+$")


def clone_failure_hint(ctx: BootstrapCtx) -> str:
    v = ctx.variant
    return "\n".join(
        [
            "Failed to clone the repository. This could be due to:",
            "  - The deploy key may not have been added to the GitHub repository",
            "  - The repository URL may be incorrect",
            "  - The SSH configuration may not be correct",
            "",
            f"Check the SSH connection by running: {ssh_test_command(v.git_user, v.git_host)}",
            "If that fails, verify your key is working correctly.",
        ]
    )


def _is_empty_dir(path: Path) -> bool:
    return path.is_dir() and not any(path.iterdir())


class CloneRepositoryStep:
    step_id = "80_clone_repository"
    description = "Cloning configuration repository"

    def _resolve_url(self, ctx: BootstrapCtx) -> str:
        url = ctx.variant.repo_url
        if url:
            ctx.log.info("Using repository: %s", url)
            return url

        url = ctx.provider.repository_url(example=ctx.variant.repo_example)
        if not url:
            raise CloneFailure("No repository URL supplied", hint="A repository URL in SSH format is required.")
        if not SSH_URL_RE.match(url):
            advise(ctx, AdvisoryWarning(f"Repository URL does not look like SSH format (user@host:path): {url}"))
        return url

    def _already_cloned(self, ctx: BootstrapCtx, url: str, dest: Path) -> bool:
        if not dest.exists() or _is_empty_dir(dest):
            return False

        origin = git_origin_url(dest, run=ctx.run)
        if origin == url:
            return True
        raise CloneFailure(
            f"Destination {dest} is not empty (origin={origin or 'none'})",
            hint=(
                f"{dest} already exists and does not hold a clone of {url}. "
                "Move it aside or remove it, then run the bootstrap again."
            ),
        )

    def _apply_permissions(self, ctx: BootstrapCtx, dest: Path) -> None:
        v = ctx.variant

        if v.destination_mode is not None:
            os.chmod(dest, v.destination_mode)
            ctx.log.info("Set %s to mode %o", dest, v.destination_mode)

        for rel in v.script_dirs:
            n = mark_executable(dest / rel, v.script_pattern)
            ctx.log.info("Made %d script(s) executable under %s", n, dest / rel)

        if v.playbook_pattern and v.playbook_mode is not None:
            n = chmod_matching(dest, v.playbook_pattern, v.playbook_mode)
            ctx.log.info("Set %d %s file(s) to mode %o", n, v.playbook_pattern, v.playbook_mode)

        log = v.downstream_log
        if log is not None:
            touch_protected(log.path, log.mode, owner=log.owner, group=log.group)
            ctx.log.info("Protected %s (mode %o, %s:%s)", log.path, log.mode, log.owner, log.group)

    def run(self, ctx: BootstrapCtx) -> None:
        url = self._resolve_url(ctx)
        dest = ctx.variant.destination
        ctx.state.repo_url = url

        if self._already_cloned(ctx, url, dest):
            ctx.state.clone_skipped = True
            ctx.log.info("%s already holds a clone of %s; skipping clone", dest, url)
        else:
            dest.parent.mkdir(parents=True, exist_ok=True)
            ctx.log.info("Attempting to clone repository: %s", url)
            print("Cloning repository...")
            if not git_clone(url, dest, run=ctx.run):
                raise CloneFailure(
                    f"Failed to clone the repository: {url}",
                    hint=clone_failure_hint(ctx),
                )
            ctx.log.info("Repository cloned successfully")

        self._apply_permissions(ctx, dest)
