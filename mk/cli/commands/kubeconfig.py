from __future__ import annotations

import typer

from mk.core.kubeconfig import get_kubeconfig_path


def kubeconfig() -> None:
    """Print the active kubeconfig file (first entry of KUBECONFIG)."""
    typer.echo(get_kubeconfig_path())
