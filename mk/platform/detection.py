"""Platform and architecture detection.

Detection is lazy and cached. Platform names coming from outside (command
line, tests, Go-style ``GOOS`` values) are normalized with
``Platform.parse``.
"""

from __future__ import annotations

import os as _os
import platform as _platform
import sys as _sys
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache

__all__ = [
    "Platform",
    "Arch",
    "PlatformInfo",
    "detect",
    "detect_arch",
    "detect_platform",
    "is_windows",
]


class Platform(Enum):
    """Operating system platform."""

    LINUX = auto()
    MACOS = auto()
    WINDOWS = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: str) -> Platform:
        """Map a platform identifier (``sys.platform``, GOOS, or our own names)."""
        system = value.strip().lower()
        if system.startswith("linux"):
            return cls.LINUX
        if system.startswith(("darwin", "macos")):
            return cls.MACOS
        if system.startswith(("win", "cygwin", "msys")):
            return cls.WINDOWS
        return cls.UNKNOWN

    @property
    def exe_suffix(self) -> str:
        """Get executable file suffix for this platform."""
        return ".exe" if self == Platform.WINDOWS else ""

    @property
    def download_os(self) -> str:
        """OS segment used in Kubernetes release download URLs."""
        return {
            Platform.LINUX: "linux",
            Platform.MACOS: "darwin",
            Platform.WINDOWS: "windows",
            Platform.UNKNOWN: "linux",
        }[self]

    def exe_name(self, name: str) -> str:
        """Example: exe_name("kubectl") -> "kubectl.exe" on Windows."""
        return f"{name}{self.exe_suffix}"


class Arch(Enum):
    """CPU architecture."""

    X64 = auto()
    ARM64 = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def download_arch(self) -> str:
        """Arch segment used in Kubernetes release download URLs."""
        return "arm64" if self == Arch.ARM64 else "amd64"


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """Detected platform and architecture. Use ``detect()`` to build one."""

    platform: Platform
    arch: Arch

    def __str__(self) -> str:
        return f"{self.platform}-{self.arch}"


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect the current operating system (cached)."""
    # NOTE: avoid platform.system() on Windows, it may query WMI.
    return Platform.parse(_sys.platform)


@lru_cache(maxsize=1)
def detect_arch() -> Arch:
    """Detect the current CPU architecture (cached)."""
    if detect_platform() == Platform.WINDOWS:
        env_arch = (
            _os.environ.get("PROCESSOR_ARCHITEW6432")
            or _os.environ.get("PROCESSOR_ARCHITECTURE")
            or ""
        )
        machine = env_arch.lower()
    else:
        machine = _platform.machine().lower()
    if machine in ("x86_64", "amd64"):
        return Arch.X64
    if machine in ("aarch64", "arm64"):
        return Arch.ARM64
    return Arch.UNKNOWN


@lru_cache(maxsize=1)
def detect() -> PlatformInfo:
    """Detect complete platform information (cached)."""
    return PlatformInfo(platform=detect_platform(), arch=detect_arch())


def is_windows() -> bool:
    """Check if running on Windows."""
    return detect_platform() == Platform.WINDOWS
