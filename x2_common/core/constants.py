"""Shared constants: environment variable names and log option tokens.

Every string the loggers look for in the environment is defined here so
that the config loader, the loggers, and the tests agree on one spelling.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------

DEBUG_ENV_VAR: str = "X2_DEBUG"
"""Whole-word list of enabled debug sections."""

LEGACY_DEBUG_ENV_VAR: str = "NODE_DEBUG"
"""Legacy spelling of ``DEBUG_ENV_VAR``; honoured alongside it."""

LOG_OPTIONS_ENV_VAR: str = "X2_LOG"
"""Comma-separated log option tokens (see below)."""

# ---------------------------------------------------------------------------
# Log option tokens (values of ``X2_LOG``)
# ---------------------------------------------------------------------------

OPT_NO_TIMESTAMP: str = "nots"
OPT_NO_PID: str = "nopid"
OPT_NO_SECTION: str = "nosec"
OPT_ENV_PREFIX: str = "env:"

# ---------------------------------------------------------------------------
# Line layout
# ---------------------------------------------------------------------------

FRAGMENT_SEPARATOR: str = " "
PREFIX_TERMINATOR: str = ":"

ERROR_LABEL: str = "ERROR"
"""Fixed label of the error logger; rendered as ``ERROR:``."""

MISSING_ENV_VALUE: str = "-"
"""Rendered in place of an ``env:<NAME>`` variable that is not set."""
