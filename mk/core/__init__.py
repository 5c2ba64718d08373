"""Core domain types and logic."""

from .errors import ErrorCode
from .kubeconfig import KUBECONFIG_ENV_VAR, default_kubeconfig_path, get_kubeconfig_path
from .preferences import (
    FilePreferences,
    MemoryPreferences,
    Preferences,
    PreferencesError,
    load_preferences,
)
from .result import Err, Ok, Result
from .version import get_version

__all__ = [
    # errors
    "ErrorCode",
    # kubeconfig
    "KUBECONFIG_ENV_VAR",
    "default_kubeconfig_path",
    "get_kubeconfig_path",
    # preferences
    "FilePreferences",
    "MemoryPreferences",
    "Preferences",
    "PreferencesError",
    "load_preferences",
    # result
    "Err",
    "Ok",
    "Result",
    # version
    "get_version",
]
