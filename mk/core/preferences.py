"""User preferences.

Boolean switches the user toggles with ``mk config set``. They are stored in
a small dedicated file:

  <user-config-dir>/config.toml

with content like:

  WantKubectlDownloadMsg = false
  WantReportError = true

Components never read the file directly; they receive a ``Preferences``
object and only call ``get_bool``.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from mk.core.result import Err, Ok, Result
from mk.core.structured import StrDict, as_str_dict, get_bool
from mk.platform.files import atomic_write_text
from mk.platform.paths import user_config_dir

__all__ = [
    "WANT_KUBECTL_DOWNLOAD_MSG",
    "WANT_REPORT_ERROR",
    "WANT_REPORT_ERROR_PROMPT",
    "DEFAULTS",
    "Preferences",
    "MutablePreferences",
    "PreferencesError",
    "MemoryPreferences",
    "FilePreferences",
    "load_preferences",
    "parse_bool",
    "preferences_path",
]

WANT_KUBECTL_DOWNLOAD_MSG = "WantKubectlDownloadMsg"
WANT_REPORT_ERROR = "WantReportError"
WANT_REPORT_ERROR_PROMPT = "WantReportErrorPrompt"

DEFAULTS: Mapping[str, bool] = {
    WANT_KUBECTL_DOWNLOAD_MSG: True,
    WANT_REPORT_ERROR: False,
    WANT_REPORT_ERROR_PROMPT: True,
}

_TRUE = {"true", "yes", "y", "1", "on"}
_FALSE = {"false", "no", "n", "0", "off"}


@dataclass(frozen=True, slots=True)
class PreferencesError:
    message: str
    path: Path | None = None
    hint: str | None = None


@runtime_checkable
class Preferences(Protocol):
    """Read-only view of the user's boolean preferences."""

    def get_bool(self, key: str) -> bool:
        """Return the preference value, or its default when unset."""
        ...


@runtime_checkable
class MutablePreferences(Preferences, Protocol):
    """Preferences that can also be changed (and persisted)."""

    def set(self, key: str, value: bool) -> Result[None, PreferencesError]: ...


def parse_bool(text: str) -> bool | None:
    """Parse a user-supplied boolean ("true", "no", "1", ...)."""
    value = text.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return None


def _unknown_key(key: str, path: Path | None = None) -> PreferencesError:
    return PreferencesError(
        f"Unknown preference: {key}",
        path=path,
        hint=f"Known preferences: {', '.join(sorted(DEFAULTS))}",
    )


class MemoryPreferences:
    """In-memory preferences, seeded with the defaults."""

    def __init__(self, values: Mapping[str, bool] | None = None) -> None:
        self._values: dict[str, bool] = dict(values or {})

    def get_bool(self, key: str) -> bool:
        if key in self._values:
            return self._values[key]
        return DEFAULTS.get(key, False)

    def set(self, key: str, value: bool) -> Result[None, PreferencesError]:
        if key not in DEFAULTS:
            return Err(_unknown_key(key))
        self._values[key] = value
        return Ok(None)

    def as_dict(self) -> dict[str, bool]:
        """All known preferences with defaults applied."""
        return {key: self.get_bool(key) for key in DEFAULTS}


class FilePreferences(MemoryPreferences):
    """Preferences backed by a TOML file; ``set`` rewrites the file."""

    def __init__(self, path: Path, values: Mapping[str, bool] | None = None) -> None:
        super().__init__(values)
        self.path = path

    def set(self, key: str, value: bool) -> Result[None, PreferencesError]:
        if key not in DEFAULTS:
            return Err(_unknown_key(key, self.path))

        values = {**self._values, key: value}
        written = self._write(values)
        if isinstance(written, Ok):
            self._values = values
        return written

    def _write(self, values: Mapping[str, bool]) -> Result[None, PreferencesError]:
        lines = [f"{k} = {'true' if v else 'false'}\n" for k, v in sorted(values.items())]
        try:
            atomic_write_text(self.path, "".join(lines))
        except OSError as e:
            return Err(PreferencesError(f"Could not write {self.path}: {e}", path=self.path))
        return Ok(None)


def preferences_path() -> Path:
    return user_config_dir() / "config.toml"


def _parse_toml(path: Path) -> Result[StrDict, PreferencesError]:
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return Ok({})
    except PermissionError:
        return Err(PreferencesError(f"Permission denied reading: {path}", path=path))
    except OSError as e:
        return Err(PreferencesError(f"Error reading {path}: {e}", path=path))

    try:
        data_obj: object = tomllib.loads(raw.decode("utf-8"))
    except tomllib.TOMLDecodeError as e:
        return Err(PreferencesError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(PreferencesError(f"Invalid UTF-8 in config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(PreferencesError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_preferences(path: Path | None = None) -> Result[FilePreferences, PreferencesError]:
    """Load preferences from ``path`` (default: the user config file).

    A missing file yields the defaults.
    """
    path = path or preferences_path()
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    values: dict[str, bool] = {}
    for key in result.value:
        if key not in DEFAULTS:
            return Err(_unknown_key(key, path))
        value = get_bool(result.value, key)
        if value is None:
            return Err(PreferencesError(f"{key} must be true or false", path=path))
        values[key] = value

    return Ok(FilePreferences(path, values))
