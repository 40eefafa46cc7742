"""Tests for logging configuration.

Covers:
- ``LogOptions`` defaults and token parsing
- Loading from environment variables
- Current and legacy debug variables
- Immutability
"""

from __future__ import annotations

import os
import unittest
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from x2_common.core.config import LoggingConfig, LogOptions


class TestLogOptionsDefaults(unittest.TestCase):
    """Every fragment is on when no options are given."""

    def test_defaults(self) -> None:
        opts = LogOptions()
        assert opts.timestamp is True
        assert opts.pid is True
        assert opts.section is True
        assert opts.env_vars == ()

    def test_parse_none(self) -> None:
        assert LogOptions.parse(None) == LogOptions()

    def test_parse_empty(self) -> None:
        assert LogOptions.parse("") == LogOptions()


class TestLogOptionsParse(unittest.TestCase):
    """Token parsing of the ``X2_LOG`` value."""

    def test_no_timestamp(self) -> None:
        opts = LogOptions.parse("nots")
        assert opts.timestamp is False
        assert opts.pid is True

    def test_no_pid_no_section(self) -> None:
        opts = LogOptions.parse("nopid,nosec")
        assert opts.pid is False
        assert opts.section is False
        assert opts.timestamp is True

    def test_flags_case_insensitive(self) -> None:
        opts = LogOptions.parse("NOTS,NoPid")
        assert opts.timestamp is False
        assert opts.pid is False

    def test_whitespace_and_blank_tokens_ignored(self) -> None:
        opts = LogOptions.parse(" nots , ,nopid ,")
        assert opts.timestamp is False
        assert opts.pid is False
        assert opts.section is True

    def test_env_vars_in_order(self) -> None:
        opts = LogOptions.parse("env:HOSTNAME,nots,env:REQUEST_ID")
        assert opts.env_vars == ("HOSTNAME", "REQUEST_ID")

    def test_env_name_keeps_case(self) -> None:
        opts = LogOptions.parse("ENV:MixedCase")
        assert opts.env_vars == ("MixedCase",)

    def test_repeated_env_kept(self) -> None:
        opts = LogOptions.parse("env:FOO,env:FOO")
        assert opts.env_vars == ("FOO", "FOO")

    def test_empty_env_name_ignored(self) -> None:
        opts = LogOptions.parse("env:,env:  ")
        assert opts.env_vars == ()

    def test_unknown_tokens_ignored(self) -> None:
        opts = LogOptions.parse("verbose,nots,colour")
        assert opts == LogOptions(timestamp=False)


class TestLogOptionsImmutability:
    """``LogOptions`` is frozen."""

    def test_frozen(self) -> None:
        opts = LogOptions()
        with pytest.raises(ValidationError):
            opts.pid = False  # type: ignore[misc]


class TestLoggingConfigFromEnv(unittest.TestCase):
    """Verify loading from environment variables."""

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = LoggingConfig.from_env()
        assert cfg.debug_sections == ""
        assert cfg.options == LogOptions()

    def test_loads_from_environment(self) -> None:
        env = {"X2_DEBUG": "dbos,rsparser", "X2_LOG": "nopid,env:FOO"}
        with patch.dict(os.environ, env, clear=True):
            cfg = LoggingConfig.from_env()
        assert cfg.debug_sections == "dbos,rsparser"
        assert cfg.options.pid is False
        assert cfg.options.env_vars == ("FOO",)

    def test_legacy_variable(self) -> None:
        with patch.dict(os.environ, {"NODE_DEBUG": "http"}, clear=True):
            cfg = LoggingConfig.from_env()
        assert cfg.debug_sections == "http"

    def test_current_and_legacy_combined(self) -> None:
        env = {"X2_DEBUG": "dbos", "NODE_DEBUG": "http"}
        with patch.dict(os.environ, env, clear=True):
            cfg = LoggingConfig.from_env()
        assert "dbos" in cfg.debug_sections
        assert "http" in cfg.debug_sections

    def test_frozen_immutability(self) -> None:
        cfg = LoggingConfig()
        with pytest.raises(AttributeError):
            cfg.debug_sections = "x"  # type: ignore[misc]
