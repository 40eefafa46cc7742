"""Logging configuration loaded from environment variables.

Two variables drive the loggers:

- ``X2_DEBUG`` (and its legacy spelling ``NODE_DEBUG``): whole-word list
  of debug sections to enable.
- ``X2_LOG``: comma-separated option tokens shaping every log line
  (``nots``, ``nopid``, ``nosec``, ``env:<NAME>``).

Configuration never fails: a missing variable means "feature absent"
and unknown tokens are ignored, so a typo in the environment can never
take down the process that is trying to report something.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

from x2_common.core.constants import (
    DEBUG_ENV_VAR,
    LEGACY_DEBUG_ENV_VAR,
    LOG_OPTIONS_ENV_VAR,
    OPT_ENV_PREFIX,
    OPT_NO_PID,
    OPT_NO_SECTION,
    OPT_NO_TIMESTAMP,
)

logger = logging.getLogger(__name__)


class LogOptions(BaseModel):
    """Parsed ``X2_LOG`` options.

    Attributes:
        timestamp: Include the ISO-8601 timestamp fragment.
        pid: Include the process id fragment.
        section: Include the section name fragment (debug loggers only).
        env_vars: Names of environment variables echoed on every line,
            in order of appearance.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: bool = True
    pid: bool = True
    section: bool = True
    env_vars: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: str | None) -> LogOptions:
        """Build options from the raw comma-separated token list.

        Flag tokens are matched case-insensitively; ``env:`` names keep
        their case.  Blank and unknown tokens are skipped.
        """
        if not raw:
            return cls()

        timestamp = pid = section = True
        env_vars: list[str] = []
        for token in (t.strip() for t in raw.split(",")):
            if not token:
                continue
            lowered = token.lower()
            if lowered == OPT_NO_TIMESTAMP:
                timestamp = False
            elif lowered == OPT_NO_PID:
                pid = False
            elif lowered == OPT_NO_SECTION:
                section = False
            elif lowered.startswith(OPT_ENV_PREFIX):
                name = token[len(OPT_ENV_PREFIX) :].strip()
                if name:
                    env_vars.append(name)
            else:
                logger.debug("Ignoring unknown log option | token=%s", token)

        return cls(timestamp=timestamp, pid=pid, section=section, env_vars=tuple(env_vars))


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Immutable snapshot of the logging environment.

    Taken once per logger when it is first built; later changes to the
    environment do not reach loggers that already exist.

    Attributes:
        debug_sections: Raw enabling text from ``X2_DEBUG`` and
            ``NODE_DEBUG`` (space-joined when both are set).
        options: Parsed ``X2_LOG`` options.
    """

    debug_sections: str = ""
    options: LogOptions = field(default_factory=LogOptions)

    @classmethod
    def from_env(cls) -> LoggingConfig:
        """Load configuration from environment variables."""
        sections = " ".join(
            value
            for value in (os.getenv(DEBUG_ENV_VAR), os.getenv(LEGACY_DEBUG_ENV_VAR))
            if value
        )
        return cls(
            debug_sections=sections,
            options=LogOptions.parse(os.getenv(LOG_OPTIONS_ENV_VAR)),
        )
