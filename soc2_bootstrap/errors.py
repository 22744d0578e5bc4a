from __future__ import annotations

from typing import Optional


class PrivilegeError(PermissionError):
    """Raised before any mutation when the process is not running as root."""

    hint = "This script must be run as root. Try using sudo."


class StepFailure(RuntimeError):
    """A provisioning step did not succeed.

    ``step_id`` is filled in by the pipeline driver when the raising code
    does not know which step it runs under. ``hint`` is the paragraph shown
    to the operator on the console.
    """

    hint = ""

    def __init__(self, message: str, *, step_id: Optional[str] = None, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.step_id = step_id
        if hint is not None:
            self.hint = hint


class PackageManagerError(StepFailure):
    hint = (
        "The package manager reported a failure. Check network access to the "
        "Ubuntu mirrors and that no other apt process holds the dpkg lock, "
        "then run the bootstrap again."
    )


class InstallationVerificationError(StepFailure):
    def __init__(self, tool: str, *, step_id: Optional[str] = None) -> None:
        super().__init__(f"{tool} installation failed: '{tool}' not found on PATH", step_id=step_id)
        self.tool = tool
        self.hint = (
            f"{tool} installation failed. Please check your system and try again "
            f"(apt-get install reported success but '{tool}' is not on PATH)."
        )


class CredentialWriteError(StepFailure):
    hint = (
        "Could not write SSH material under the home directory. Check free disk "
        "space and the ownership of ~/.ssh, then run the bootstrap again."
    )


class CloneFailure(StepFailure):
    pass


class AdvisoryWarning(UserWarning):
    """Non-fatal finding; logged and the run continues."""
