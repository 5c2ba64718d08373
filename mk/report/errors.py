"""Failures of the crash-reporting pipeline.

Each stage returns one of these inside an ``Err``; nothing is raised and
nothing is retried.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "InvalidInputError",
    "NoStackTraceError",
    "SerializationError",
    "TransportError",
    "RemoteRejectionError",
    "ReportError",
]


@dataclass(frozen=True, slots=True)
class InvalidInputError:
    message: str = "format_error was called without an error value"


@dataclass(frozen=True, slots=True)
class NoStackTraceError:
    error_type: str

    @property
    def message(self) -> str:
        return f"{self.error_type} carries no stack trace and cannot be reported"


@dataclass(frozen=True, slots=True)
class SerializationError:
    message: str


@dataclass(frozen=True, slots=True)
class TransportError:
    """The endpoint could not be reached (DNS, refused, timeout, bad URL)."""

    url: str
    reason: str

    @property
    def message(self) -> str:
        return f"Error sending error report to {self.url}: {self.reason}"


@dataclass(frozen=True, slots=True)
class RemoteRejectionError:
    """The endpoint answered with a non-2xx status."""

    url: str
    status: int
    body: str = ""

    @property
    def message(self) -> str:
        return (
            f"Error sending error report to {self.url}, "
            f"got response code {self.status} and response {self.body!r}"
        )


ReportError = (
    InvalidInputError
    | NoStackTraceError
    | SerializationError
    | TransportError
    | RemoteRejectionError
)
