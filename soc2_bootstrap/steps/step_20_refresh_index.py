from __future__ import annotations

from ..context import BootstrapCtx
from ..lib.pkg import apt_update


class RefreshPackageIndexStep:
    step_id = "20_refresh_package_index"
    description = "Updating package lists"

    def run(self, ctx: BootstrapCtx) -> None:
        print("Updating system packages. This may take a while...")
        apt_update(run=ctx.run)
