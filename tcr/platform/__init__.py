"""Platform abstraction layer."""

from .detection import Platform, detect_platform, is_macos, is_windows, native_arch, normalize_arch
from .paths import global_store_path, project_store_path, settings_path, user_config_dir
from .process import ProcessError, run

__all__ = [
    # detection
    "Platform",
    "detect_platform",
    "is_macos",
    "is_windows",
    "native_arch",
    "normalize_arch",
    # paths
    "global_store_path",
    "project_store_path",
    "settings_path",
    "user_config_dir",
    # process
    "ProcessError",
    "run",
]
