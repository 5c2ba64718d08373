"""Version string of the host program."""

from __future__ import annotations

from mk import __version__

__all__ = ["get_version"]


def get_version() -> str:
    """Return the release identifier, e.g. ``v0.1.0``."""
    return f"v{__version__}"
