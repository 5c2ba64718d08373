from __future__ import annotations

from dataclasses import dataclass

import typer

from mk.core.errors import ErrorCode
from mk.core.preferences import FilePreferences, load_preferences
from mk.core.result import Err
from mk.output.console import ConsoleProtocol, RichConsole
from mk.platform.detection import PlatformInfo, detect


@dataclass(frozen=True, slots=True)
class CLIContext:
    platform: PlatformInfo
    preferences: FilePreferences
    console: ConsoleProtocol


def build_context() -> CLIContext:
    preferences_result = load_preferences()
    if isinstance(preferences_result, Err):
        typer.echo(f"error: {preferences_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(
        platform=detect(),
        preferences=preferences_result.value,
        console=RichConsole(),
    )
