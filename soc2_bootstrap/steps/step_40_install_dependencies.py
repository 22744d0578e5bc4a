from __future__ import annotations

from typing import Optional

from ..context import BootstrapCtx
from ..errors import InstallationVerificationError
from ..lib.command import CommandError
from ..lib.pkg import add_apt_repository, apt_install


class InstallDependenciesStep:
    step_id = "40_install_dependencies"
    description = "Installing essential packages"

    def _probe_version(self, ctx: BootstrapCtx) -> Optional[str]:
        argv = ctx.variant.version_probe
        if not argv:
            return None
        try:
            out = ctx.run(argv).stdout
        except (CommandError, FileNotFoundError):
            ctx.log.warning("Could not read version from %s", " ".join(argv))
            return None
        lines = out.strip().splitlines()
        return lines[0].strip() if lines else None

    def run(self, ctx: BootstrapCtx) -> None:
        v = ctx.variant
        apt_install(v.packages, run=ctx.run)

        for source in v.package_sources:
            ctx.log.info("Adding package source %s", source)
            add_apt_repository(source, run=ctx.run)

        for group in v.tool_groups:
            ctx.log.info("Installing %s", group.label)
            apt_install(group.packages, run=ctx.run)

        # Package installs can succeed without putting the binary on PATH.
        for tool in v.required_tools:
            if not ctx.which(tool):
                raise InstallationVerificationError(tool)
            ctx.log.info("Verified %s is installed", tool)

        version = self._probe_version(ctx)
        if version:
            ctx.state.tool_version = version
            ctx.log.info("Installed %s", version)
            print(f"Successfully installed {version}")
