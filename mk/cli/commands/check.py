from __future__ import annotations

from mk.cli.context import build_context
from mk.services.kubectl import KubectlAdvisor


def check() -> None:
    """Check that kubectl is installed and explain how to get it if not."""
    ctx = build_context()

    advisor = KubectlAdvisor(preferences=ctx.preferences, arch=ctx.platform.arch)
    advisor.maybe_print(ctx.platform.platform, ctx.console)
