"""
Tests for environment-driven configuration.
"""

import pytest

from named_exception import Config, ThrowableError


@pytest.fixture
def config_env(monkeypatch):
    """Snapshot Config so reload() changes are undone after the test."""
    monkeypatch.setattr(Config, "CAPTURE_STACK_TRACE", Config.CAPTURE_STACK_TRACE)
    monkeypatch.delenv("NAMED_EXCEPTION_CAPTURE_STACK_TRACE", raising=False)
    return monkeypatch


class TestConfig:
    def test_defaults(self, config_env):
        Config.reload()

        assert Config.CAPTURE_STACK_TRACE is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off"])
    def test_disable_stack_trace(self, config_env, value):
        config_env.setenv("NAMED_EXCEPTION_CAPTURE_STACK_TRACE", value)

        Config.reload()

        assert Config.CAPTURE_STACK_TRACE is False
        assert ThrowableError("x").stack_trace is None

    def test_enable_stack_trace(self, config_env):
        config_env.setenv("NAMED_EXCEPTION_CAPTURE_STACK_TRACE", "Yes")

        Config.reload()

        assert Config.CAPTURE_STACK_TRACE is True
        assert ThrowableError("x").stack_trace is not None
