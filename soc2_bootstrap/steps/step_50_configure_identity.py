from __future__ import annotations

import re

from ..context import BootstrapCtx
from ..errors import AdvisoryWarning
from ..lib.git import git_config_global

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def looks_like_email(value: str) -> bool:
    return EMAIL_RE.match(value) is not None


def advise(ctx: BootstrapCtx, warning: AdvisoryWarning) -> None:
    """Record a non-fatal finding and keep going."""

    ctx.state.warnings.append(str(warning))
    ctx.log.warning("%s: %s", type(warning).__name__, warning)


class ConfigureIdentityStep:
    step_id = "50_configure_identity"
    description = "Configuring Git commit identity"

    def run(self, ctx: BootstrapCtx) -> None:
        name = ctx.provider.commit_name()
        email = ctx.provider.commit_email()

        if not looks_like_email(email):
            print("Warning: The email address doesn't appear to be valid. Continuing anyway...")
            advise(ctx, AdvisoryWarning(f"Potentially invalid email format: {email}"))

        ctx.log.info("Configuring Git with user: %s, email: %s", name, email)
        git_config_global("user.name", name, run=ctx.run)
        git_config_global("user.email", email, run=ctx.run)

        ctx.state.commit_name = name
        ctx.state.commit_email = email
