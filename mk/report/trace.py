"""Cause-chain traversal and stack-trace extraction.

Errors are chained the Python way (``raise Wrapped(...) from cause``). A
trace comes from the exception's ``__traceback__``, so an exception that was
built but never raised has none. Error types that record their own frames
(e.g. ones created far from where they are raised) can implement
``StackTracer`` instead.
"""

from __future__ import annotations

import traceback
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = [
    "Frame",
    "StackTracer",
    "error_cause",
    "error_text",
    "iter_chain",
    "stack_trace",
]


@dataclass(frozen=True, slots=True)
class Frame:
    file: str
    line: int
    function: str

    def __str__(self) -> str:
        return f"{self.function}({self.file}:{self.line})"


@runtime_checkable
class StackTracer(Protocol):
    """An error that knows its own stack trace."""

    def stack_trace(self) -> Sequence[Frame] | None: ...


def error_text(err: BaseException) -> str:
    """Return ``str(err)``, or a placeholder when its ``__str__`` fails."""
    try:
        return str(err)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(err).__name__} object>"


def error_cause(err: BaseException) -> BaseException | None:
    """Return the wrapped cause: explicit ``__cause__``, else unsuppressed context."""
    if err.__cause__ is not None:
        return err.__cause__
    if err.__suppress_context__:
        return None
    return err.__context__


def iter_chain(err: BaseException) -> Iterator[BaseException]:
    """Yield ``err`` and its causes, outermost first. Stops on cycles."""
    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = error_cause(current)


def stack_trace(err: BaseException) -> list[Frame] | None:
    """Return the frames attached to ``err``, or None when it has no trace."""
    if isinstance(err, StackTracer):
        frames = list(err.stack_trace() or ())
        return frames or None

    tb = err.__traceback__
    if tb is None:
        return None
    frames = [
        Frame(file=summary.filename, line=summary.lineno or 0, function=summary.name)
        for summary in traceback.extract_tb(tb)
    ]
    return frames or None
