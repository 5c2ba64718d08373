"""Crash reporting: format an error, marshall it, upload it once."""

from .crash import REPORTING_URL, maybe_report_error
from .errors import (
    InvalidInputError,
    NoStackTraceError,
    RemoteRejectionError,
    ReportError,
    SerializationError,
    TransportError,
)
from .reporter import (
    DEFAULT_EXIT_CODE,
    ErrorReport,
    format_error,
    marshall_error,
    report_error,
    upload_error,
)
from .trace import Frame, StackTracer, error_text

__all__ = [
    # crash
    "REPORTING_URL",
    "maybe_report_error",
    # errors
    "InvalidInputError",
    "NoStackTraceError",
    "RemoteRejectionError",
    "ReportError",
    "SerializationError",
    "TransportError",
    # reporter
    "DEFAULT_EXIT_CODE",
    "ErrorReport",
    "format_error",
    "marshall_error",
    "report_error",
    "upload_error",
    # trace
    "Frame",
    "StackTracer",
    "error_text",
]
