from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .context import BootstrapCtx, Options, SessionContext
from .errors import PrivilegeError, StepFailure
from .lib import sysinfo
from .lib.command import Runner, run_cmd, which
from .lib.env import DEFAULT_LOG_DIR, Paths
from .lib.ssh import HOST_KEY_POLICIES
from .logging_utils import close_logging, configure_logging
from .pipeline import PipelineResult, run_pipeline
from .prompts import CredentialProvider, TerminalCredentialProvider
from .steps import (
    CaptureCredentialStep,
    CloneRepositoryStep,
    ConfigureIdentityStep,
    ConfigureTransportStep,
    InstallDependenciesStep,
    RecordEnvironmentStep,
    RefreshPackageIndexStep,
    ReportCompletionStep,
    UpgradePackagesStep,
)
from .variants import DEFAULT_VARIANT, Variant, available_variants, load_variant, load_variant_file


def build_steps():
    return [
        RecordEnvironmentStep(),
        RefreshPackageIndexStep(),
        UpgradePackagesStep(),
        InstallDependenciesStep(),
        ConfigureIdentityStep(),
        CaptureCredentialStep(),
        ConfigureTransportStep(),
        CloneRepositoryStep(),
        ReportCompletionStep(),
    ]


def capture_session(
    *,
    log_file: Path,
    euid: int,
    run: Runner,
    which_fn: Callable[[str], Optional[str]],
) -> SessionContext:
    return SessionContext(
        started_at=datetime.now(),
        invoking_user=sysinfo.current_user(),
        effective_uid=euid,
        sudo_user=sysinfo.sudo_user(),
        hostname=sysinfo.hostname(),
        kernel_version=sysinfo.kernel_version(),
        os_release=sysinfo.os_release(run=run, which_fn=which_fn),
        log_file=log_file,
    )


def run(
    *,
    variant: Variant,
    paths: Optional[Paths] = None,
    options: Optional[Options] = None,
    provider: Optional[CredentialProvider] = None,
    runner: Runner = run_cmd,
    which_fn: Callable[[str], Optional[str]] = which,
    euid: Optional[int] = None,
    verbose: bool = False,
) -> PipelineResult:
    """Run the bootstrap sequence, raising on the first failure.

    The privilege check happens before anything touches the filesystem.
    """

    euid = sysinfo.effective_uid() if euid is None else euid
    if euid != 0:
        raise PrivilegeError("This script must be run as root")

    paths = paths or Paths()
    log, log_path = configure_logging(
        paths.log_dir,
        variant.log_prefix,
        level=logging.DEBUG if verbose else logging.INFO,
    )
    try:
        ctx = BootstrapCtx(
            variant=variant,
            paths=paths,
            session=capture_session(log_file=log_path, euid=euid, run=runner, which_fn=which_fn),
            log=log,
            provider=provider or TerminalCredentialProvider(),
            run=runner,
            which=which_fn,
            options=options or Options(),
        )
        return run_pipeline(ctx=ctx, steps=build_steps())
    except StepFailure as e:
        log.error("%s [%s]: %s", type(e).__name__, e.step_id, e)
        raise
    except Exception:
        log.exception("Bootstrap failed")
        raise
    finally:
        close_logging(log)


def _help_text(variant: Variant) -> str:
    lines = ["This script prepares a server for SOC2 compliance by:"]
    lines += [f"  - {a}" for a in variant.actions]
    if variant.needs:
        lines += ["", "You will need:"]
        lines += [f"  - {n}" for n in variant.needs]
    return "\n".join(lines)


def build_parser(prog: str, variant: Variant) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=prog,
        description=f"{variant.title}\n{'=' * len(variant.title)}\n{_help_text(variant)}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Must be run as root (sudo).",
    )
    p.add_argument("--variant", default=variant.name, choices=available_variants(), help="Bootstrap variant")
    p.add_argument("--variant-file", default=None, help="Path to a custom variant manifest (YAML)")
    p.add_argument("--log-dir", default=DEFAULT_LOG_DIR, help="Directory for run logs")
    p.add_argument("--dist-upgrade", action="store_true", help="Use apt-get dist-upgrade instead of upgrade")
    p.add_argument(
        "--host-key-policy",
        default="no",
        choices=HOST_KEY_POLICIES,
        help="StrictHostKeyChecking value written to the SSH config",
    )
    p.add_argument("--verbose", action="store_true", help="Log command output")
    return p


def main(argv: Optional[list[str]] = None, *, default_variant: str = DEFAULT_VARIANT) -> int:
    prog = "soc2-bootstrap" if default_variant == DEFAULT_VARIANT else f"soc2-{default_variant}-bootstrap"
    args = build_parser(prog, load_variant(default_variant)).parse_args(argv)

    variant = load_variant_file(args.variant_file) if args.variant_file else load_variant(args.variant)

    try:
        run(
            variant=variant,
            paths=Paths(log_dir=Path(args.log_dir)),
            options=Options(dist_upgrade=bool(args.dist_upgrade), host_key_policy=args.host_key_policy),
            verbose=bool(args.verbose),
        )
    except PrivilegeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print(e.hint)
        return 1
    except StepFailure as e:
        if e.hint:
            print(e.hint)
        return 1
    return 0


def ansible_main(argv: Optional[list[str]] = None) -> int:
    return main(argv, default_variant="ansible")


if __name__ == "__main__":
    raise SystemExit(main())
