import logging

import pytest
from rich.console import Console

from core.log import setup_logging
from core.settings import Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    # set first so whatever a loaded .env writes is undone afterwards
    for name in ("DS_LESSONS_LOG_LEVEL", "DS_LESSONS_ANIMATION_SPEED"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults_without_environment():
    settings = Settings.from_environment(load_env_file=False)
    assert settings == Settings(log_level="WARNING", animation_speed=1.0)


def test_reads_prefixed_variables(monkeypatch):
    monkeypatch.setenv("DS_LESSONS_LOG_LEVEL", "debug")
    monkeypatch.setenv("DS_LESSONS_ANIMATION_SPEED", "2.5")

    settings = Settings.from_environment(load_env_file=False)

    assert settings.log_level == "DEBUG"
    assert settings.animation_speed == 2.5


def test_unknown_log_level_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("DS_LESSONS_LOG_LEVEL", "chatty")

    with caplog.at_level(logging.WARNING, logger="core.settings"):
        settings = Settings.from_environment(load_env_file=False)

    assert settings.log_level == "WARNING"
    assert "Unknown log level" in caplog.text


def test_invalid_speed_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("DS_LESSONS_ANIMATION_SPEED", "fast")

    with caplog.at_level(logging.WARNING, logger="core.settings"):
        settings = Settings.from_environment(load_env_file=False)

    assert settings.animation_speed == 1.0
    assert "Invalid animation speed" in caplog.text


def test_env_file_is_loaded(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("DS_LESSONS_LOG_LEVEL=INFO\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    settings = Settings.from_environment()

    assert settings.log_level == "INFO"


def test_settings_are_immutable():
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.log_level = "DEBUG"


def test_setup_logging_installs_rich_handler(monkeypatch):
    from rich.logging import RichHandler

    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("info", console=Console(file=None, quiet=True))

    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert root.level == logging.INFO
