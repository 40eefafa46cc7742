"""Debug logger registry.

Usage::

    from x2_common import get_debug_logger

    debug = get_debug_logger("dbos")
    debug("executing query")

A section is enabled when its name appears as a whole word in
``X2_DEBUG`` or ``NODE_DEBUG`` (case-insensitive), e.g.
``X2_DEBUG=dbos,rsparser``.  The decision and the line layout are made
once, on the first request for a section, and memoized for the life of
the process.  Disabled sections get a no-op.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Callable

from x2_common.core.config import LoggingConfig
from x2_common.log.builder import MessageBuilder

logger = logging.getLogger(__name__)

DebugLogger = Callable[[object], None]

# ---------------------------------------------------------------------------
# Process-wide registry
# ---------------------------------------------------------------------------

_DEBUG_LOGGERS: dict[str, DebugLogger] = {}
_REGISTRY_LOCK = threading.Lock()


def _disabled(message: object) -> None:
    """Debug logger of a section that is not enabled."""


def section_enabled(section: str, debug_sections: str) -> bool:
    """Return whether *section* appears in *debug_sections* as a whole word."""
    if not section or not debug_sections:
        return False
    pattern = re.compile(rf"\b{re.escape(section)}\b", re.IGNORECASE)
    return pattern.search(debug_sections) is not None


def _build_debug_logger(section: str, config: LoggingConfig) -> DebugLogger:
    if not section_enabled(section, config.debug_sections):
        return _disabled
    builder = MessageBuilder.from_options(config.options, section=section)
    logger.debug(
        "Debug section enabled | section=%s | fragments=%d",
        section,
        len(builder.fragments),
    )
    return builder.emit


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_debug_logger(section: str) -> DebugLogger:
    """Get the debug logger for a section.

    Args:
        section: Name of the section being debugged. Compared
            case-insensitively.

    Returns:
        A function taking one argument, the debug message.  For an
        enabled section it writes one line to standard error; otherwise
        it does nothing.
    """
    key = section.upper()
    debug = _DEBUG_LOGGERS.get(key)
    if debug is not None:
        return debug

    with _REGISTRY_LOCK:
        debug = _DEBUG_LOGGERS.get(key)
        if debug is None:
            debug = _build_debug_logger(key, LoggingConfig.from_env())
            _DEBUG_LOGGERS[key] = debug
    return debug


def clear_debug_loggers() -> None:
    """Forget every memoized debug logger (test support)."""
    with _REGISTRY_LOCK:
        _DEBUG_LOGGERS.clear()
