"""Tests for mk.services.kubectl module."""

from __future__ import annotations

import pytest

from mk.core.preferences import WANT_KUBECTL_DOWNLOAD_MSG, MemoryPreferences
from mk.output.console import MockConsole, Style
from mk.platform.detection import Arch, Platform
from mk.services.kubectl import (
    DEFAULT_KUBERNETES_VERSION,
    KubectlAdvisor,
    LookPath,
    maybe_print_kubectl_download_msg,
)

MARKER = "WantKubectlDownloadMsg"


def look_path_found(name: str) -> str | None:
    return f"/usr/local/bin/{name}"


def look_path_missing(name: str) -> str | None:
    return None


class RecordingLookPath:
    def __init__(self, found: set[str]) -> None:
        self.found = found
        self.names: list[str] = []

    def __call__(self, name: str) -> str | None:
        self.names.append(name)
        return f"C:\\bin\\{name}" if name in self.found else None


def _prefs(enabled: bool) -> MemoryPreferences:
    return MemoryPreferences({WANT_KUBECTL_DOWNLOAD_MSG: enabled})


class TestKubectlDownloadMsg:
    @pytest.mark.parametrize("platform", ["windows", "darwin", "linux"])
    def test_no_output_when_binary_is_found(self, platform: str) -> None:
        console = MockConsole()
        maybe_print_kubectl_download_msg(
            platform, console, preferences=_prefs(True), look_path=look_path_found
        )
        assert console.outputs == []

    def test_windows_not_found_mentions_exe(self) -> None:
        console = MockConsole()
        maybe_print_kubectl_download_msg(
            "windows", console, preferences=_prefs(True), look_path=look_path_missing
        )
        assert ".exe" in console.text
        assert MARKER in console.text
        assert "download kubectl from:" in console.text

    def test_linux_not_found(self) -> None:
        console = MockConsole()
        maybe_print_kubectl_download_msg(
            "linux", console, preferences=_prefs(True), look_path=look_path_missing
        )
        assert MARKER in console.text
        assert ".exe" not in console.text
        assert "curl -Lo kubectl" in console.text
        assert console.outputs[0].style == Style.WARNING

    @pytest.mark.parametrize("look_path", [look_path_found, look_path_missing])
    def test_disabled_prints_nothing(self, look_path: LookPath) -> None:
        console = MockConsole()
        maybe_print_kubectl_download_msg(
            "linux", console, preferences=_prefs(False), look_path=look_path
        )
        assert console.outputs == []

    def test_platform_enum_is_accepted(self) -> None:
        console = MockConsole()
        maybe_print_kubectl_download_msg(
            Platform.MACOS, console, preferences=_prefs(True), look_path=look_path_missing
        )
        assert "/bin/darwin/" in console.text


class TestKubectlAdvisor:
    def test_disabled_skips_lookup(self) -> None:
        look_path = RecordingLookPath(found=set())
        advisor = KubectlAdvisor(preferences=_prefs(False), look_path=look_path)

        assert advisor.advisory(Platform.LINUX) is None
        assert look_path.names == []

    def test_windows_also_tries_exe_name(self) -> None:
        look_path = RecordingLookPath(found={"kubectl.exe"})
        advisor = KubectlAdvisor(preferences=_prefs(True), look_path=look_path)

        assert advisor.advisory(Platform.WINDOWS) is None
        assert look_path.names == ["kubectl", "kubectl.exe"]

    def test_linux_only_tries_plain_name(self) -> None:
        look_path = RecordingLookPath(found={"kubectl.exe"})
        advisor = KubectlAdvisor(preferences=_prefs(True), look_path=look_path)

        assert advisor.advisory(Platform.LINUX) is not None
        assert look_path.names == ["kubectl"]

    def test_download_url(self) -> None:
        advisor = KubectlAdvisor(
            preferences=_prefs(True), look_path=look_path_missing, arch=Arch.ARM64
        )
        assert advisor.download_url(Platform.LINUX) == (
            "https://storage.googleapis.com/kubernetes-release/release/"
            f"{DEFAULT_KUBERNETES_VERSION}/bin/linux/arm64/kubectl"
        )
        assert advisor.download_url(Platform.WINDOWS).endswith("/bin/windows/arm64/kubectl.exe")

    def test_kubernetes_version_in_message(self) -> None:
        advisor = KubectlAdvisor(
            preferences=_prefs(True),
            look_path=look_path_missing,
            arch=Arch.X64,
            kubernetes_version="v1.30.2",
        )
        message = advisor.advisory("linux")
        assert message is not None
        assert "/release/v1.30.2/bin/linux/amd64/kubectl " in message

    def test_defaults_to_preference_defaults(self) -> None:
        advisor = KubectlAdvisor(preferences=MemoryPreferences(), look_path=look_path_missing)
        assert advisor.advisory("linux") is not None
