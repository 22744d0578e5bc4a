from __future__ import annotations

from datetime import datetime

from ..context import BootstrapCtx


class ReportCompletionStep:
    step_id = "90_report_completion"
    description = "Reporting completion"

    def run(self, ctx: BootstrapCtx) -> None:
        v = ctx.variant
        finished = datetime.now()
        ctx.log.info("Bootstrap completed successfully at %s", finished.isoformat(timespec="seconds"))
        if ctx.state.warnings:
            ctx.log.info("Completed with %d advisory warning(s)", len(ctx.state.warnings))

        lines = [
            "",
            f"{v.title} complete!",
            f"Repository is located at: {v.destination}",
            "",
            "Next steps:",
            *v.next_steps,
            "",
            "For security, consider deleting the SSH deploy key after setup is complete:",
            f"  rm {ctx.deploy_key_path}",
            "",
            f"Bootstrap completed at: {finished.strftime('%a %b %d %H:%M:%S %Y')}",
        ]
        print("\n".join(lines))
