"""Tests for environment helper utilities."""

import importlib

import pytest


def _reloaded_env():
    # Reload module to clear lru_cache
    import voscope.utils.env
    return importlib.reload(voscope.utils.env)


class TestIsDevMode:
    """Tests for is_dev_mode function."""

    def test_returns_false_when_no_env_vars(self, monkeypatch):
        monkeypatch.delenv("VOSCOPE_ENV", raising=False)
        monkeypatch.delenv("VOSCOPE_DEV_MODE", raising=False)

        assert _reloaded_env().is_dev_mode() is False

    @pytest.mark.parametrize("value", ["dev", "development", "1", "true", "yes", "DEV", " Yes "])
    def test_returns_true_for_dev_values(self, monkeypatch, value):
        monkeypatch.setenv("VOSCOPE_ENV", value)
        monkeypatch.delenv("VOSCOPE_DEV_MODE", raising=False)

        assert _reloaded_env().is_dev_mode() is True

    def test_dev_mode_flag_used_when_env_unset(self, monkeypatch):
        monkeypatch.delenv("VOSCOPE_ENV", raising=False)
        monkeypatch.setenv("VOSCOPE_DEV_MODE", "true")

        assert _reloaded_env().is_dev_mode() is True

    @pytest.mark.parametrize("value", ["prod", "production", "0", "false", "no", "staging"])
    def test_returns_false_for_non_dev_values(self, monkeypatch, value):
        monkeypatch.setenv("VOSCOPE_ENV", value)
        monkeypatch.delenv("VOSCOPE_DEV_MODE", raising=False)

        assert _reloaded_env().is_dev_mode() is False


class TestIsPerfDebug:
    """Tests for is_perf_debug function."""

    def test_enabled_by_flag(self, monkeypatch):
        monkeypatch.setenv("VOSCOPE_PERF_DEBUG", "1")
        assert _reloaded_env().is_perf_debug() is True

    def test_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("VOSCOPE_PERF_DEBUG", raising=False)
        assert _reloaded_env().is_perf_debug() is False
