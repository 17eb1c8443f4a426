import logging

import pytest
from pydantic import ValidationError

from liftlog import WorkoutStore, configure_logging
from liftlog.settings import Settings, get_settings


def test_defaults(monkeypatch):
    for var in ("DATABASE_URL", "LOG_LEVEL", "HISTORY_TIMEZONE", "SQL_ECHO"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.DATABASE_URL.startswith("sqlite:///")
    assert s.LOG_LEVEL == "INFO"
    assert s.HISTORY_TIMEZONE == "UTC"
    assert s.SQL_ECHO is False


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'env.db'}")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("HISTORY_TIMEZONE", "Europe/Berlin")
    s = Settings(_env_file=None)
    assert s.DATABASE_URL.endswith("env.db")
    assert s.LOG_LEVEL == "DEBUG"
    assert str(s.history_tz) == "Europe/Berlin"


def test_unknown_timezone_rejected(monkeypatch):
    monkeypatch.setenv("HISTORY_TIMEZONE", "Mars/Olympus_Mons")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_store_uses_configured_database(monkeypatch, tmp_path):
    url = f"sqlite:///{tmp_path / 'configured.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()
    try:
        with WorkoutStore() as store:
            assert store.database_url == url
            store.create_schema()
            store.create_template("From env")
        assert (tmp_path / "configured.db").exists()
    finally:
        get_settings.cache_clear()


def test_configure_logging():
    logger = configure_logging("WARNING")
    assert logger.name == "liftlog"
    assert logger.level == logging.WARNING
    configure_logging("NOTSET")


def test_log_level_validated(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)

    monkeypatch.setenv("LOG_LEVEL", " warning ")
    assert Settings(_env_file=None).LOG_LEVEL == "WARNING"
