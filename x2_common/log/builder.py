"""Log line assembly.

A ``MessageBuilder`` is the immutable recipe for one logger's lines: an
ordered tuple of zero-argument fragment callables, decided once from the
``LoggingConfig`` in force when the logger was built.  Each call
evaluates every fragment again, so live values (process id, echoed
environment variables) stay current while the *set* of fragments does
not change.

Line layout::

    <timestamp> <pid> <env values...> <section|label>: <message>

The last prefix fragment carries the trailing colon.  With no prefix
fragments at all the line is just the message.
"""

from __future__ import annotations

import contextlib
import os
import sys
from collections.abc import Callable
from dataclasses import dataclass

from x2_common.core.config import LogOptions
from x2_common.core.constants import (
    FRAGMENT_SEPARATOR,
    MISSING_ENV_VALUE,
    PREFIX_TERMINATOR,
)
from x2_common.utils.helpers import iso_timestamp

Fragment = Callable[[], str]


# ---------------------------------------------------------------------------
# Fragment factories
# ---------------------------------------------------------------------------


def timestamp_fragment() -> Fragment:
    """Fragment rendering the current UTC time in ISO 8601."""
    return iso_timestamp


def pid_fragment() -> Fragment:
    """Fragment rendering the current process id."""

    def _pid() -> str:
        return str(os.getpid())

    return _pid


def env_fragment(name: str) -> Fragment:
    """Fragment echoing the current value of environment variable *name*."""

    def _env() -> str:
        return os.environ.get(name, MISSING_ENV_VALUE)

    return _env


def constant_fragment(text: str) -> Fragment:
    """Fragment rendering fixed *text* (section name or label)."""

    def _constant() -> str:
        return text

    return _constant


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MessageBuilder:
    """Ordered prefix fragments followed by the message.

    Attributes:
        fragments: Prefix fragment callables, evaluated left to right on
            every call.
    """

    fragments: tuple[Fragment, ...] = ()

    @classmethod
    def from_options(
        cls,
        options: LogOptions,
        *,
        section: str | None = None,
        label: str | None = None,
    ) -> MessageBuilder:
        """Assemble the fragment list for *options*.

        Args:
            options: Parsed ``X2_LOG`` options.
            section: Normalized section name of a debug logger; included
                unless ``options.section`` is off.
            label: Fixed trailing label (e.g. ``"ERROR"``); always
                included, after every configurable fragment.
        """
        fragments: list[Fragment] = []
        if options.timestamp:
            fragments.append(timestamp_fragment())
        if options.pid:
            fragments.append(pid_fragment())
        fragments.extend(env_fragment(name) for name in options.env_vars)
        if section is not None and options.section:
            fragments.append(constant_fragment(section))
        if label is not None:
            fragments.append(constant_fragment(label))
        return cls(fragments=tuple(fragments))

    def build(self, message: object) -> str:
        """Evaluate every fragment and join them with *message*."""
        parts = [fragment() for fragment in self.fragments]
        if parts:
            parts[-1] += PREFIX_TERMINATOR
        parts.append(str(message))
        return FRAGMENT_SEPARATOR.join(parts)

    def emit(self, message: object) -> None:
        """Write the built line to standard error."""
        stream = sys.stderr
        if stream is None:
            return
        line = self.build(message) + "\n"
        with contextlib.suppress(OSError, ValueError):
            stream.write(line)
            stream.flush()
