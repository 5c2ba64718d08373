"""kubectl install advisory.

``mk`` drives the cluster through kubectl but does not ship it. At startup we
check the search path and, unless the user turned the hint off, explain how
to install it.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass, field

from mk.core.preferences import WANT_KUBECTL_DOWNLOAD_MSG, Preferences
from mk.output.console import ConsoleProtocol, Style
from mk.platform.detection import Arch, Platform, detect_arch

__all__ = [
    "DEFAULT_KUBERNETES_VERSION",
    "KubectlAdvisor",
    "LookPath",
    "maybe_print_kubectl_download_msg",
]

DEFAULT_KUBERNETES_VERSION = "v1.10.0"

KUBECTL_RELEASE_URL = (
    "https://storage.googleapis.com/kubernetes-release/release"
    "/{version}/bin/{os}/{arch}/{binary}"
)

LookPath = Callable[[str], str | None]
"""Resolve an executable name on the search path; None when absent."""

_ADVISORY = """========================================
kubectl could not be found on your path. kubectl is a requirement for using mk
To install kubectl, please {verb} the following:

{instructions}

To disable this message, run the following:

mk config set {key} false
========================================"""


@dataclass(frozen=True, slots=True)
class KubectlAdvisor:
    """Decide whether to print the kubectl advisory.

    Attributes:
        preferences: Source of the WantKubectlDownloadMsg switch
        look_path: Search-path lookup (``shutil.which`` by default)
        arch: Architecture used in the download URL
        kubernetes_version: Release used in the download URL
    """

    preferences: Preferences
    look_path: LookPath = field(default=shutil.which)
    arch: Arch = field(default_factory=detect_arch)
    kubernetes_version: str = DEFAULT_KUBERNETES_VERSION

    def kubectl_found(self, platform: Platform) -> bool:
        if self.look_path("kubectl"):
            return True
        if platform == Platform.WINDOWS:
            return bool(self.look_path(platform.exe_name("kubectl")))
        return False

    def download_url(self, platform: Platform) -> str:
        return KUBECTL_RELEASE_URL.format(
            version=self.kubernetes_version,
            os=platform.download_os,
            arch=self.arch.download_arch,
            binary=platform.exe_name("kubectl"),
        )

    def advisory(self, platform: Platform | str) -> str | None:
        """Return the advisory text, or None when nothing should be printed."""
        if isinstance(platform, str):
            platform = Platform.parse(platform)

        if not self.preferences.get_bool(WANT_KUBECTL_DOWNLOAD_MSG):
            return None
        if self.kubectl_found(platform):
            return None

        url = self.download_url(platform)
        if platform == Platform.WINDOWS:
            verb = "do"
            instructions = f"download kubectl from:\n{url}\nAdd kubectl to your system PATH"
        else:
            verb = "run"
            instructions = (
                f"curl -Lo kubectl {url} && chmod +x kubectl && "
                "sudo cp kubectl /usr/local/bin/ && rm kubectl"
            )
        return _ADVISORY.format(
            verb=verb, instructions=instructions, key=WANT_KUBECTL_DOWNLOAD_MSG
        )

    def maybe_print(self, platform: Platform | str, console: ConsoleProtocol) -> None:
        message = self.advisory(platform)
        if message is not None:
            console.print(message, Style.WARNING)


def maybe_print_kubectl_download_msg(
    platform: Platform | str,
    console: ConsoleProtocol,
    *,
    preferences: Preferences,
    look_path: LookPath = shutil.which,
) -> None:
    """Print the kubectl install advisory when kubectl is missing."""
    KubectlAdvisor(preferences=preferences, look_path=look_path).maybe_print(platform, console)
