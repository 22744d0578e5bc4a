from __future__ import annotations

from ..context import BootstrapCtx
from ..errors import CredentialWriteError
from ..lib.fsutil import backup_file, write_private_file
from ..lib.ssh import render_host_config

CONFIG_MODE = 0o600


class ConfigureTransportStep:
    step_id = "70_configure_transport"
    description = "Configuring SSH for GitHub access"

    def run(self, ctx: BootstrapCtx) -> None:
        config = ctx.paths.ssh_config
        host = ctx.variant.git_host

        try:
            if config.is_file():
                ctx.log.info("Backing up existing SSH config")
                backup = backup_file(config, ctx.stamp())
                ctx.state.ssh_config_backup = backup
                ctx.log.info("SSH config backed up to %s", backup)

            body = render_host_config(
                host,
                str(ctx.deploy_key_path),
                host_key_policy=ctx.options.host_key_policy,
            )
            write_private_file(config, body, CONFIG_MODE)
        except OSError as e:
            raise CredentialWriteError(f"Could not write SSH config {config}: {e}") from e

        ctx.log.info(
            "SSH config for %s written to %s (StrictHostKeyChecking %s)",
            host,
            config,
            ctx.options.host_key_policy,
        )
