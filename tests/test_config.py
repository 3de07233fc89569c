"""
Tests for environment-driven settings.
"""

import importlib
import logging
import re

import pytest

import pywithout
from pywithout import BlockerSettings, ConfigurationError, load_settings
from pywithout.matchers import ExactMatcher, GlobMatcher, RegexMatcher


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PYWITHOUT_MODULES", raising=False)
    monkeypatch.delenv("PYWITHOUT_LOG_LEVEL", raising=False)


class TestBlockerSettings:
    """Tests for BlockerSettings."""

    def test_defaults(self):
        settings = BlockerSettings()
        assert settings.modules == ""
        assert settings.log_level == "WARNING"
        assert settings.log_level_value == logging.WARNING
        assert settings.matchers() == []

    def test_loads_from_env_vars(self, monkeypatch):
        monkeypatch.setenv("PYWITHOUT_MODULES", "yaml")
        monkeypatch.setenv("PYWITHOUT_LOG_LEVEL", "debug")

        settings = BlockerSettings()

        assert settings.modules == "yaml"
        assert settings.log_level == "DEBUG"
        assert settings.log_level_value == logging.DEBUG

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MODULES", "yaml")
        assert BlockerSettings().modules == ""

    def test_parses_matchers(self):
        settings = BlockerSettings(modules=r"yaml, re:^numpy(\.|$) ,pandas.io.*,")

        assert settings.matchers() == [
            ExactMatcher("yaml"),
            RegexMatcher(re.compile(r"^numpy(\.|$)")),
            GlobMatcher("pandas.io.*"),
        ]

    def test_invalid_regex(self):
        settings = BlockerSettings(modules="re:[unclosed")

        with pytest.raises(ConfigurationError):
            settings.matchers()

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("PYWITHOUT_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError, match="Invalid pywithout settings"):
            load_settings()

    def test_load_settings_overrides(self):
        settings = load_settings(modules="toml")
        assert settings.matchers() == [ExactMatcher("toml")]


class TestEnableFromSettings:
    """Tests for enabling blocks from settings."""

    def test_enable_from_env(self, monkeypatch, default_blocker, make_module):
        make_module("optdep")
        monkeypatch.setenv("PYWITHOUT_MODULES", "optdep,other.*")

        enabled = pywithout.enable_from_settings()

        assert enabled == [ExactMatcher("optdep"), GlobMatcher("other.*")]
        assert default_blocker.blocked() == enabled
        with pytest.raises(ModuleNotFoundError):
            importlib.import_module("optdep")

    def test_configures_logging(self, default_blocker):
        pywithout.enable_from_settings(BlockerSettings(log_level="ERROR"))
        assert logging.getLogger("pywithout").level == logging.ERROR

    def test_nothing_configured(self, default_blocker):
        import sys

        before = list(sys.meta_path)

        assert default_blocker.enable_from_settings(BlockerSettings()) == []
        assert sys.meta_path == before
