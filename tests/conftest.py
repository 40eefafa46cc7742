"""Shared pytest fixtures for the x2-common test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from x2_common.core.constants import (
    DEBUG_ENV_VAR,
    LEGACY_DEBUG_ENV_VAR,
    LOG_OPTIONS_ENV_VAR,
)
from x2_common.log.debug import clear_debug_loggers
from x2_common.log.error import reset_error_logger

# ---------------------------------------------------------------------------
# Logging state isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_logging_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test with no logging variables and no memoized loggers."""
    for name in (DEBUG_ENV_VAR, LEGACY_DEBUG_ENV_VAR, LOG_OPTIONS_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
    clear_debug_loggers()
    reset_error_logger()
    yield
    clear_debug_loggers()
    reset_error_logger()
