"""Tests for loginpanel/utils/logging.py."""

import logging

import pytest

from loginpanel.utils.logging import configure_root


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestConfigureRoot:
    def test_default_level(self, monkeypatch):
        monkeypatch.delenv("LOGINPANEL_LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOGINPANEL_DEBUG", raising=False)

        assert configure_root() == logging.INFO

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOGINPANEL_LOG_LEVEL", "warning")

        assert configure_root() == logging.WARNING
        assert logging.getLogger().level == logging.WARNING

    def test_debug_flag(self, monkeypatch):
        monkeypatch.delenv("LOGINPANEL_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOGINPANEL_DEBUG", "yes")

        assert configure_root() == logging.DEBUG

    def test_unknown_level_name_falls_back(self, monkeypatch):
        monkeypatch.setenv("LOGINPANEL_LOG_LEVEL", "chatty")

        assert configure_root() == logging.INFO

    def test_numeric_level(self, monkeypatch):
        monkeypatch.setenv("LOGINPANEL_LOG_LEVEL", "30")

        assert configure_root() == logging.WARNING
