"""Platform abstraction layer."""

from .detection import (
    Arch,
    Platform,
    PlatformInfo,
    detect,
    detect_arch,
    detect_platform,
    is_windows,
)
from .files import atomic_write_text
from .paths import (
    clear_caches,
    home,
    user_config_dir,
)

__all__ = [
    # detection
    "Arch",
    "Platform",
    "PlatformInfo",
    "detect",
    "detect_arch",
    "detect_platform",
    "is_windows",
    # files
    "atomic_write_text",
    # paths
    "clear_caches",
    "home",
    "user_config_dir",
]
