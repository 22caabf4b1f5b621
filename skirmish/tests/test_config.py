"""
Tests for environment configuration.
"""

import importlib

import pytest

from .. import config


class TestEnvInt:
    """Integer settings read from the environment."""

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("SKIRMISH_TEST_INT", raising=False)
        assert config._env_int("SKIRMISH_TEST_INT", 200) == 200

    def test_valid_value(self, monkeypatch):
        monkeypatch.setenv("SKIRMISH_TEST_INT", "50")
        assert config._env_int("SKIRMISH_TEST_INT", 200) == 50

    @pytest.mark.parametrize("raw", ["fast", "1.5", ""])
    def test_malformed_value_uses_default(self, monkeypatch, raw):
        monkeypatch.setenv("SKIRMISH_TEST_INT", raw)
        assert config._env_int("SKIRMISH_TEST_INT", 200) == 200


class TestTurnDelay:
    """The turn delay setting survives a bad environment."""

    def test_malformed_turn_delay(self, monkeypatch):
        monkeypatch.setenv("SKIRMISH_TURN_DELAY_MS", "soon")
        try:
            reloaded = importlib.reload(config)
            assert reloaded.TURN_DELAY_MS == 200
        finally:
            monkeypatch.delenv("SKIRMISH_TURN_DELAY_MS")
            importlib.reload(config)
