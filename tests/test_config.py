"""Tests for WebConfig environment loading."""

from __future__ import annotations

import pytest

from mykanban.web.config import WebConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in (
        "MYKANBAN_HOST",
        "MYKANBAN_PORT",
        "MYKANBAN_DB_PATH",
        "MYKANBAN_JWT_SECRET",
        "MYKANBAN_JWT_EXPIRE_HOURS",
        "MYKANBAN_DEBUG",
        "MYKANBAN_LOG_LEVEL",
        "MYKANBAN_CORS_ORIGINS",
    ):
        monkeypatch.delenv(var, raising=False)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("MYKANBAN_JWT_SECRET", "s3cret")
    monkeypatch.setenv("MYKANBAN_PORT", "9000")
    monkeypatch.setenv("MYKANBAN_DB_PATH", "/tmp/k.db")
    monkeypatch.setenv("MYKANBAN_LOG_LEVEL", "debug")
    monkeypatch.setenv("MYKANBAN_CORS_ORIGINS", "http://a.test, http://b.test")

    config = WebConfig.load()
    assert config.jwt_secret == "s3cret"
    assert config.port == 9000
    assert config.db_path == "/tmp/k.db"
    assert config.log_level == "DEBUG"
    assert config.cors_origins == ["http://a.test", "http://b.test"]


def test_missing_secret_outside_debug_refuses_to_start():
    with pytest.raises(RuntimeError, match="MYKANBAN_JWT_SECRET"):
        WebConfig.load()


def test_missing_secret_in_debug_generates_one(monkeypatch):
    monkeypatch.setenv("MYKANBAN_DEBUG", "true")
    first = WebConfig.load()
    second = WebConfig.load()
    assert first.debug is True
    assert len(first.jwt_secret) == 64
    assert first.jwt_secret != second.jwt_secret
