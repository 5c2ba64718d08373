from __future__ import annotations

import os
from pathlib import Path

import pytest

from mk.platform.files import atomic_write_text


def test_creates_parent_dirs(tmp_path: Path) -> None:
    path = tmp_path / "mk" / "config.toml"

    atomic_write_text(path, "WantReportError = true\n")

    assert path.read_text(encoding="utf-8") == "WantReportError = true\n"


def test_replaces_existing_content(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("WantReportError = false\n", encoding="utf-8")

    atomic_write_text(path, "WantReportError = true\n")

    assert path.read_text(encoding="utf-8") == "WantReportError = true\n"


def test_failed_replace_keeps_original_and_cleans_up(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    path = tmp_path / "config.toml"
    path.write_text("WantReportError = false\n", encoding="utf-8")

    def fail_replace(_src: Path, _dst: Path) -> None:
        raise OSError("replace failed")

    monkeypatch.setattr(os, "replace", fail_replace)

    with pytest.raises(OSError, match="replace failed"):
        atomic_write_text(path, "WantReportError = true\n")

    assert path.read_text(encoding="utf-8") == "WantReportError = false\n"
    assert list(tmp_path.glob(f".{path.name}.*.tmp")) == []
