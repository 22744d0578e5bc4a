from __future__ import annotations

from ..context import BootstrapCtx
from ..lib.pkg import apt_upgrade


class UpgradePackagesStep:
    step_id = "30_upgrade_packages"
    description = "Upgrading system packages"

    def run(self, ctx: BootstrapCtx) -> None:
        if ctx.options.dist_upgrade:
            ctx.log.info("Using dist-upgrade")
        apt_upgrade(dist_upgrade=ctx.options.dist_upgrade, run=ctx.run)
