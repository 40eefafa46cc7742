"""Shared application error logger.

Usage::

    from x2_common import X2DataError, log_error

    try:
        load(record)
    except X2DataError as err:
        log_error("could not load record", err)

Unlike debug loggers the error logger is always active.  Its layout is
read from ``X2_LOG`` on the first call and kept for the life of the
process::

    <timestamp> <pid> <env values...> ERROR: <message>
    <error name>: <error message>
    <stack>
"""

from __future__ import annotations

import logging
import threading

from x2_common.core.config import LoggingConfig
from x2_common.core.constants import ERROR_LABEL
from x2_common.log.builder import MessageBuilder
from x2_common.utils.helpers import describe_error

logger = logging.getLogger(__name__)

_error_builder: MessageBuilder | None = None
_ERROR_BUILDER_LOCK = threading.Lock()


def _get_error_builder() -> MessageBuilder:
    """Build the shared error line builder once (idempotent)."""
    global _error_builder
    if _error_builder is None:
        with _ERROR_BUILDER_LOCK:
            if _error_builder is None:
                config = LoggingConfig.from_env()
                _error_builder = MessageBuilder.from_options(config.options, label=ERROR_LABEL)
                logger.debug(
                    "Error logger built | fragments=%d",
                    len(_error_builder.fragments),
                )
    return _error_builder


def log_error(message: str, error: BaseException | None = None) -> None:
    """Log application error.

    Args:
        message: Error message.
        error: Optional error; when given, its name, message and stack
            follow the message on new lines.
    """
    text = message if error is None else f"{message}\n{describe_error(error)}"
    _get_error_builder().emit(text)


def reset_error_logger() -> None:
    """Drop the memoized error builder so the next call re-reads ``X2_LOG`` (test support)."""
    global _error_builder
    with _ERROR_BUILDER_LOCK:
        _error_builder = None
