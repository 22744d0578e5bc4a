from __future__ import annotations

from ..context import BootstrapCtx
from ..errors import CredentialWriteError
from ..lib.fsutil import ensure_dir, write_private_file

SSH_DIR_MODE = 0o700
KEY_MODE = 0o600


class CaptureCredentialStep:
    step_id = "60_capture_credential"
    description = "Setting up SSH directory and deploy key"

    def run(self, ctx: BootstrapCtx) -> None:
        ssh_dir = ctx.paths.ssh_dir
        try:
            ensure_dir(ssh_dir, SSH_DIR_MODE)
        except OSError as e:
            raise CredentialWriteError(f"Could not create {ssh_dir}: {e}") from e

        key_path = ctx.deploy_key_path
        material = ctx.provider.private_key(repository_label=f"{ctx.variant.title} repository")
        try:
            # Not validated here; a bad key only shows up when cloning.
            write_private_file(key_path, material, KEY_MODE)
        except OSError as e:
            raise CredentialWriteError(f"Could not write deploy key {key_path}: {e}") from e
        finally:
            del material

        ctx.state.deploy_key = key_path
        ctx.log.info("Deploy key written to %s (mode %o)", key_path, KEY_MODE)
