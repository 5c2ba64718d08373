"""Kubeconfig location lookup.

``KUBECONFIG`` may list several files separated by ``os.pathsep``. Only the
first entry is used as the active configuration file.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from mk.platform.paths import home

__all__ = [
    "KUBECONFIG_ENV_VAR",
    "default_kubeconfig_path",
    "get_kubeconfig_path",
]

KUBECONFIG_ENV_VAR = "KUBECONFIG"


def default_kubeconfig_path() -> Path:
    """Return ``<home>/.kube/config``."""
    return home() / ".kube" / "config"


def get_kubeconfig_path(environ: Mapping[str, str] | None = None) -> str:
    """Return the first path listed in KUBECONFIG, or the default location.

    Empty entries are skipped rather than returned, so a leading separator
    (``":/b"``) yields ``/b`` instead of an empty path. A value with no
    non-empty entry falls back to the default location.
    """
    env = os.environ if environ is None else environ
    value = env.get(KUBECONFIG_ENV_VAR, "")
    for entry in value.split(os.pathsep):
        if entry:
            return entry
    return str(default_kubeconfig_path())
