"""Crash report pipeline: format, marshall, upload.

The host calls ``report_error`` (or the three stages in order) when it hits
an unexpected error. Every stage returns a Result; the first failure ends
the pipeline and is handed back unchanged.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass

from mk.core.result import Err, Ok, Result
from mk.core.version import get_version
from mk.report.errors import (
    InvalidInputError,
    NoStackTraceError,
    RemoteRejectionError,
    ReportError,
    SerializationError,
    TransportError,
)
from mk.report.http import HttpClient, RealHttpClient
from mk.report.trace import error_text, iter_chain, stack_trace

__all__ = [
    "DEFAULT_EXIT_CODE",
    "ErrorReport",
    "format_error",
    "marshall_error",
    "report_error",
    "upload_error",
]

DEFAULT_EXIT_CODE = "default"


@dataclass(frozen=True, slots=True)
class ErrorReport:
    """Payload sent to the collection endpoint."""

    message: str
    exit_code: str
    version: str

    def to_json(self) -> str:
        data = asdict(self)
        data["exit-code"] = data.pop("exit_code")
        return json.dumps(data, ensure_ascii=False)


def _describe(err: BaseException) -> str:
    text = error_text(err)
    return text if text else type(err).__name__


def format_error(err: BaseException | None) -> Result[str, InvalidInputError | NoStackTraceError]:
    """Render an error and its stack traces as plain text.

    The first line joins the messages of the whole cause chain, outer to
    inner. It is followed by one block per traced error, innermost first:
    a ``Type: message`` header, then one tab-indented ``at function(file:line)``
    line per frame.
    """
    if not isinstance(err, BaseException):
        return Err(InvalidInputError())

    chain = list(iter_chain(err))
    traced = [(e, frames) for e in chain if (frames := stack_trace(e))]
    if not traced:
        return Err(NoStackTraceError(error_type=type(err).__name__))

    lines = [": ".join(_describe(e) for e in chain)]
    for e, frames in reversed(traced):
        lines.append(f"{type(e).__name__}: {error_text(e)}")
        lines.extend(f"\tat {frame}" for frame in frames)
    return Ok("\n".join(lines))


def marshall_error(
    message: str, exit_code: str, version: str
) -> Result[bytes, SerializationError]:
    """Serialize a report to UTF-8 JSON."""
    report = ErrorReport(message=message, exit_code=exit_code, version=version)
    try:
        return Ok(report.to_json().encode("utf-8"))
    except (TypeError, ValueError) as e:
        # UnicodeEncodeError (lone surrogates) is a ValueError
        return Err(SerializationError(f"Error marshalling error report: {e}"))


def upload_error(
    payload: bytes | str,
    url: str,
    *,
    client: HttpClient | None = None,
) -> Result[None, TransportError | RemoteRejectionError]:
    """POST the payload once. Any non-2xx answer is a rejection."""
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    client = client or RealHttpClient()

    result = client.post_json(url, payload)
    if isinstance(result, Err):
        error = result.error
        if error.status == 0:
            return Err(TransportError(url=url, reason=error.message))
        return Err(RemoteRejectionError(url=url, status=error.status, body=error.body))

    response = result.value
    if not response.ok:
        return Err(RemoteRejectionError(url=url, status=response.status, body=response.body))
    return Ok(None)


def report_error(
    err: BaseException | None,
    url: str,
    *,
    client: HttpClient | None = None,
    version: str | None = None,
) -> Result[None, ReportError]:
    """Format, marshall and upload ``err``; stop at the first failing stage."""
    version = version or get_version()
    return (
        format_error(err)
        .flat_map(lambda text: marshall_error(text, DEFAULT_EXIT_CODE, version))
        .flat_map(lambda payload: upload_error(payload, url, client=client))
    )
