from __future__ import annotations

import typer

from mk.cli.commands._helpers import exit_on_error
from mk.cli.context import build_context
from mk.core.errors import ErrorCode
from mk.core.preferences import DEFAULTS, parse_bool
from mk.output.console import Style

config_app = typer.Typer(no_args_is_help=True, help="View and change user preferences.")


def _require_known(key: str) -> None:
    if key not in DEFAULTS:
        typer.echo(f"error: unknown preference: {key}", err=True)
        typer.echo(f"hint: known preferences: {', '.join(sorted(DEFAULTS))}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))


@config_app.command("get")
def get(key: str = typer.Argument(..., help="Preference name")) -> None:
    """Print the value of a preference."""
    _require_known(key)
    ctx = build_context()
    typer.echo("true" if ctx.preferences.get_bool(key) else "false")


@config_app.command("set")
def set_(
    key: str = typer.Argument(..., help="Preference name"),
    value: str = typer.Argument(..., help="true or false"),
) -> None:
    """Change a preference and save it."""
    _require_known(key)
    parsed = parse_bool(value)
    if parsed is None:
        typer.echo(f"error: expected true or false, got: {value}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    ctx = build_context()
    exit_on_error(ctx.preferences.set(key, parsed), ctx, error_code=ErrorCode.IO_ERROR)
    ctx.console.success(f"{key} = {'true' if parsed else 'false'}")


@config_app.command("view")
def view() -> None:
    """Show all preferences."""
    ctx = build_context()
    ctx.console.print(f"file: {ctx.preferences.path}", Style.DIM)
    for key, value in ctx.preferences.as_dict().items():
        ctx.console.print(f"{key}: {'true' if value else 'false'}")
