"""Configuration checks.

- CheckSession / run_checks: drive a list of checkers over one store
- check_arch, check_xcode_dir, check_xcode_sdkver: platform settings
- checkers_for: built-in checker lists per target platform
"""

from tcr.checks.platform import SdkLocators, check_arch, check_xcode_dir, check_xcode_sdkver
from tcr.checks.runner import CheckSession, ToolchainCheck, run_checks
from tcr.checks.tables import PLATFORMS, TOOLKINDS, UnknownPlatformError, checkers_for

__all__ = [
    # Session
    "CheckSession",
    "ToolchainCheck",
    "run_checks",
    # Platform checks
    "SdkLocators",
    "check_arch",
    "check_xcode_dir",
    "check_xcode_sdkver",
    # Tables
    "PLATFORMS",
    "TOOLKINDS",
    "UnknownPlatformError",
    "checkers_for",
]
