from .step_10_record_environment import RecordEnvironmentStep
from .step_20_refresh_index import RefreshPackageIndexStep
from .step_30_upgrade_packages import UpgradePackagesStep
from .step_40_install_dependencies import InstallDependenciesStep
from .step_50_configure_identity import ConfigureIdentityStep
from .step_60_capture_credential import CaptureCredentialStep
from .step_70_configure_transport import ConfigureTransportStep
from .step_80_clone_repository import CloneRepositoryStep
from .step_90_report_completion import ReportCompletionStep

__all__ = [
    "RecordEnvironmentStep",
    "RefreshPackageIndexStep",
    "UpgradePackagesStep",
    "InstallDependenciesStep",
    "ConfigureIdentityStep",
    "CaptureCredentialStep",
    "ConfigureTransportStep",
    "CloneRepositoryStep",
    "ReportCompletionStep",
]
