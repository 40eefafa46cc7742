"""X2 framework common utilities.

Shared error kinds and the environment-driven debug/error loggers used
by every other X2 component.
"""

from x2_common.core.exceptions import (
    ErrorKind,
    X2DataError,
    X2Error,
    X2SyntaxError,
    X2UsageError,
)
from x2_common.log.debug import get_debug_logger
from x2_common.log.error import log_error

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "X2DataError",
    "X2Error",
    "X2SyntaxError",
    "X2UsageError",
    "get_debug_logger",
    "log_error",
]
