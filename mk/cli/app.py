from __future__ import annotations

import sys

import typer

from mk import __version__
from mk.cli.commands.check import check
from mk.cli.commands.config_cmd import config_app
from mk.cli.commands.kubeconfig import kubeconfig
from mk.core.preferences import MemoryPreferences, MutablePreferences, load_preferences
from mk.core.result import Err
from mk.output.console import RichConsole
from mk.report.crash import maybe_report_error
from mk.report.trace import error_text


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(check)
app.command()(kubeconfig)

# Sub-apps
app.add_typer(config_app, name="config")


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    pass


def _confirm(message: str) -> bool:
    if not sys.stdin.isatty():
        return False
    try:
        return typer.confirm(message, default=False)
    except typer.Abort:
        return False


def handle_crash(err: BaseException) -> int:
    """Tell the user about an unexpected error and offer to report it."""
    console = RichConsole(stderr=True)
    console.error(f"unexpected error: {error_text(err)}")

    loaded = load_preferences()
    preferences: MutablePreferences
    if isinstance(loaded, Err):
        console.warning(loaded.error.message)
        preferences = MemoryPreferences()
    else:
        preferences = loaded.value

    return maybe_report_error(err, preferences=preferences, console=console, confirm=_confirm)


def main() -> None:
    try:
        app()
    except Exception as e:  # noqa: BLE001
        raise SystemExit(handle_crash(e)) from None
