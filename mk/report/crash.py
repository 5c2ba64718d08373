"""Opt-in crash reporting for unexpected errors.

Called once from the CLI entry point when a command dies with an exception.
The user either opted in (``WantReportError``), is asked once
(``WantReportErrorPrompt``), or opted out. Whatever happens, reporting never
raises: failures are shown as a warning and the crash exit code is returned.
"""

from __future__ import annotations

from collections.abc import Callable

from mk.core.errors import ErrorCode
from mk.core.preferences import (
    WANT_REPORT_ERROR,
    WANT_REPORT_ERROR_PROMPT,
    MutablePreferences,
)
from mk.core.result import Err, Ok, Result
from mk.output.console import ConsoleProtocol, Style
from mk.report.errors import ReportError
from mk.report.http import HttpClient
from mk.report.reporter import report_error

__all__ = ["REPORTING_URL", "maybe_report_error"]

REPORTING_URL = (
    "https://clouderrorreporting.googleapis.com/v1beta1/projects/k8s-minikube/events:report"
)

_BANNER = "=" * 80
_OPT_IN_PROMPT = f"""{_BANNER}
An error has occurred. Would you like to opt in to sending anonymized crash
information to help prevent future errors?
To opt out of these messages, run the command:
\tmk config set {WANT_REPORT_ERROR_PROMPT} false
{_BANNER}"""


def _ask(
    preferences: MutablePreferences,
    console: ConsoleProtocol,
    confirm: Callable[[str], bool],
) -> bool:
    console.print(_OPT_IN_PROMPT, Style.WARNING)
    if not confirm("Send crash report?"):
        return False

    saved = preferences.set(WANT_REPORT_ERROR, True)
    if isinstance(saved, Err):
        console.warning(f"could not remember your choice: {saved.error.message}")
    return True


def maybe_report_error(
    err: BaseException,
    *,
    preferences: MutablePreferences,
    console: ConsoleProtocol,
    confirm: Callable[[str], bool],
    url: str = REPORTING_URL,
    client: HttpClient | None = None,
) -> int:
    """Report ``err`` if the user agrees; return the exit code for the crash."""
    if preferences.get_bool(WANT_REPORT_ERROR):
        send = True
    elif preferences.get_bool(WANT_REPORT_ERROR_PROMPT):
        send = _ask(preferences, console, confirm)
    else:
        send = False

    if send:
        result: Result[None, ReportError] = report_error(err, url, client=client)
        match result:
            case Err(error):
                console.warning(f"crash report not sent: {error.message}")
            case Ok(_):
                console.info("crash report sent")

    return int(ErrorCode.INTERNAL_ERROR)
