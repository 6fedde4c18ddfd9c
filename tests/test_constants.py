"""Tests for env-driven constants."""

from feed_auth.constants import _get_env_bool, _get_env_int


def test_get_env_int_default(monkeypatch):
    monkeypatch.delenv("FEED_AUTH_TEST_INT", raising=False)
    assert _get_env_int("FEED_AUTH_TEST_INT", 7) == 7


def test_get_env_int_override(monkeypatch):
    monkeypatch.setenv("FEED_AUTH_TEST_INT", "12")
    assert _get_env_int("FEED_AUTH_TEST_INT", 7) == 12


def test_get_env_int_invalid_falls_back(monkeypatch, capsys):
    monkeypatch.setenv("FEED_AUTH_TEST_INT", "twelve")
    assert _get_env_int("FEED_AUTH_TEST_INT", 7) == 7
    assert "Invalid integer value" in capsys.readouterr().out


def test_get_env_bool(monkeypatch):
    monkeypatch.setenv("FEED_AUTH_TEST_BOOL", "No")
    assert _get_env_bool("FEED_AUTH_TEST_BOOL", True) is False
    monkeypatch.setenv("FEED_AUTH_TEST_BOOL", "1")
    assert _get_env_bool("FEED_AUTH_TEST_BOOL", False) is True
    monkeypatch.setenv("FEED_AUTH_TEST_BOOL", "maybe")
    assert _get_env_bool("FEED_AUTH_TEST_BOOL", True) is True
