from .step_00_sanity_checks import SanityChecksStep
from .step_10_detect_driver import DetectDriverStep
from .step_15_detect_only_summary import DetectOnlySummaryStep
from .step_20_update_packages import UpdatePackagesStep
from .step_30_kernel_headers import KernelHeadersStep
from .step_40_dkms_build_tools import DkmsBuildToolsStep
from .step_50_install_driver import InstallDriverStep
from .step_60_install_utils import InstallUtilsStep
from .step_70_drm_modeset import DrmModesetStep
from .step_80_reset_monitors import ResetMonitorsStep
from .step_90_summary import SummaryStep, prompt_reboot

__all__ = [
    "SanityChecksStep",
    "DetectDriverStep",
    "DetectOnlySummaryStep",
    "UpdatePackagesStep",
    "KernelHeadersStep",
    "DkmsBuildToolsStep",
    "InstallDriverStep",
    "InstallUtilsStep",
    "DrmModesetStep",
    "ResetMonitorsStep",
    "SummaryStep",
    "prompt_reboot",
]
