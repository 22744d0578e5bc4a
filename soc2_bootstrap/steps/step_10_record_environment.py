from __future__ import annotations

from ..context import BootstrapCtx


class RecordEnvironmentStep:
    step_id = "10_record_environment"
    description = "Recording system information"

    def run(self, ctx: BootstrapCtx) -> None:
        s = ctx.session
        ctx.log.info("Starting %s (variant=%s)", ctx.variant.title, ctx.variant.name)
        ctx.log.info("Run log: %s", s.log_file)
        ctx.log.info("System information:\n%s", s.os_release)
        ctx.log.info("Kernel: %s", s.kernel_version)
        ctx.log.info("Hostname: %s", s.hostname)
        ctx.log.info("Script executed by user: %s (euid=%s)", s.invoking_user, s.effective_uid)
        if s.sudo_user:
            ctx.log.info("Real user behind sudo: %s", s.sudo_user)
        else:
            ctx.log.info("Script appears to be run directly as root (no sudo detected)")
