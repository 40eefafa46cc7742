"""Shared helper functions used by the debug and error loggers."""

from __future__ import annotations

import traceback
from datetime import UTC, datetime

from x2_common.core.exceptions import X2Error


def iso_timestamp(now: datetime | None = None) -> str:
    """Return an ISO 8601 UTC timestamp with millisecond precision.

    Args:
        now: Moment to format. Defaults to ``datetime.now(UTC)``.

    Returns:
        A string such as ``"2024-05-01T12:30:00.123Z"``.
    """
    if now is None:
        now = datetime.now(UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def describe_error(error: BaseException) -> str:
    """Render an error for the error log.

    X2 errors render as ``"<name>: <message>"`` followed by the stack
    captured at construction.  Any other exception renders the way Python
    prints it: with its traceback when it has been raised, otherwise as
    ``"<Type>: <text>"``.
    """
    if isinstance(error, X2Error):
        header = f"{error.name}: {error.message}"
        return f"{header}\n{error.stack}" if error.stack else header
    return "".join(traceback.format_exception(error)).rstrip("\n")
