"""X2 error kinds.

Every error the framework raises because of how it was called, or
because of what it was given, is an ``X2Error`` tagged with one of a
closed set of kinds:

Kinds
-----
- ``ErrorKind.USAGE``: invalid arguments or inappropriate invocation of
  framework functionality (a programmer error in the caller).
- ``ErrorKind.SYNTAX``: malformed input text supplied by a caller, such
  as an invalid query or expression.
- ``ErrorKind.DATA``: structurally valid but invalid or inconsistent
  data content supplied by a caller.

Each kind has a concrete class (``X2UsageError``, ``X2SyntaxError``,
``X2DataError``) so callers can ``raise``/``except`` the usual way, while
code that handles X2 errors generically dispatches on ``err.kind``.

The call stack is captured when the error is constructed, not when it is
raised, with the constructor frames dropped so that the innermost entry
points at the code that created the error.
"""

from __future__ import annotations

import enum
import inspect
import traceback
from typing import ClassVar


class ErrorKind(enum.Enum):
    """Tag identifying which X2 error variant an error is."""

    USAGE = "usage"
    SYNTAX = "syntax"
    DATA = "data"


class X2Error(Exception):
    """Base class for the X2 error kinds.

    Attributes:
        kind: The ``ErrorKind`` tag.
        message: Human-readable error description (any text, may be empty).
        stack: Formatted call stack captured at construction, outermost
            frame first.
        stack_summary: The same stack as a ``traceback.StackSummary``.
    """

    #: Kind fixed by concrete subclasses.
    default_kind: ClassVar[ErrorKind | None] = None

    def __init__(self, message: str = "", *, kind: ErrorKind | None = None) -> None:
        resolved = kind or self.default_kind
        if resolved is None:
            msg = "X2Error requires a kind; use X2UsageError, X2SyntaxError or X2DataError"
            raise TypeError(msg)
        self.kind = resolved
        self.message = message
        self.stack_summary = _capture_caller_stack(self)
        self.stack = "".join(self.stack_summary.format()).rstrip("\n")
        super().__init__(message)

    @property
    def name(self) -> str:
        """Error name, e.g. ``"X2UsageError"``."""
        return type(self).__name__

    def to_error_dict(self) -> dict[str, str]:
        """Return a plain payload with stable keys."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "message": self.message,
        }

    def __reduce__(self) -> tuple[object, ...]:
        # Rebuild without re-running __init__ so the kind and the stack
        # captured at the original construction site survive copy/pickle.
        state = dict(self.__dict__)
        state["stack_summary"] = traceback.StackSummary.from_list(
            [(f.filename, f.lineno, f.name, f.line) for f in self.stack_summary]
        )
        return (_rebuild_error, (type(self), self.message), state)


def _rebuild_error(cls: type[X2Error], message: str) -> X2Error:
    """Recreate an unpickled error; attributes are restored from its state."""
    error = cls.__new__(cls, message)
    Exception.__init__(error, message)
    return error


def _capture_caller_stack(error: X2Error) -> traceback.StackSummary:
    """Extract the current stack, excluding every constructor frame of *error*."""
    frame = inspect.currentframe()
    try:
        # Constructor frames (including subclass __init__ chains) are the
        # ones whose ``self`` is the error being built.
        while frame is not None and (
            frame.f_code is _capture_caller_stack.__code__ or frame.f_locals.get("self") is error
        ):
            frame = frame.f_back
        if frame is None:
            return traceback.StackSummary()
        return traceback.extract_stack(frame)
    finally:
        del frame


# ---------------------------------------------------------------------------
# Concrete kinds
# ---------------------------------------------------------------------------


class X2UsageError(X2Error):
    """General framework usage error, such as invalid arguments or an
    inappropriate function call."""

    default_kind = ErrorKind.USAGE

    def __init__(self, message: str = "") -> None:
        super().__init__(message, kind=self.default_kind)


class X2SyntaxError(X2Error):
    """Provided syntax error."""

    default_kind = ErrorKind.SYNTAX

    def __init__(self, message: str = "") -> None:
        super().__init__(message, kind=self.default_kind)


class X2DataError(X2Error):
    """Provided data error."""

    default_kind = ErrorKind.DATA

    def __init__(self, message: str = "") -> None:
        super().__init__(message, kind=self.default_kind)
