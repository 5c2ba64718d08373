"""Application services for the mk CLI.

Services implement user-facing behavior on top of the domain layer (core/)
and the platform layer (platform/).
"""

from mk.services.kubectl import (
    DEFAULT_KUBERNETES_VERSION,
    KubectlAdvisor,
    LookPath,
    maybe_print_kubectl_download_msg,
)

__all__ = [
    "DEFAULT_KUBERNETES_VERSION",
    "KubectlAdvisor",
    "LookPath",
    "maybe_print_kubectl_download_msg",
]
