"""Unit tests for core.config.Settings."""

import pytest

from sqlrunner.core.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in (
        "SQLRUNNER_DATABASE_URL",
        "DATABASE_URL",
        "ORACLE_CONNECTION_STRING",
        "SQLRUNNER_CONNECT_TIMEOUT",
        "SQLRUNNER_STATEMENT_TIMEOUT",
        "SQLRUNNER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    s = Settings()
    assert s.DATABASE_URL is None
    assert s.CONNECT_TIMEOUT == 10
    assert s.STATEMENT_TIMEOUT is None
    assert s.LOG_LEVEL == "WARNING"


def test_oracle_connection_string_alias(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORACLE_CONNECTION_STRING", "oracle://u:p@h:1521/XE")
    assert Settings().DATABASE_URL == "oracle://u:p@h:1521/XE"


def test_prefixed_url_preferred(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORACLE_CONNECTION_STRING", "oracle://u:p@h:1521/XE")
    monkeypatch.setenv("SQLRUNNER_DATABASE_URL", "sqlite:///x.db")
    assert Settings().DATABASE_URL == "sqlite:///x.db"


def test_prefixed_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SQLRUNNER_CONNECT_TIMEOUT", "3")
    monkeypatch.setenv("SQLRUNNER_STATEMENT_TIMEOUT", "1.5")
    s = Settings()
    assert s.CONNECT_TIMEOUT == 3
    assert s.STATEMENT_TIMEOUT == 1.5


def test_env_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("SQLRUNNER_LOG_LEVEL=DEBUG\n", encoding="utf-8")
    assert Settings().LOG_LEVEL == "DEBUG"
