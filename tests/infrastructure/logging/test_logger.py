"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture
def fresh_singletons():
    logger_module.Logger._instance = None
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None
    yield
    logger_module.Logger._instance = None
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None


def test_builder_writes_daily_file_under_project_logs(tmp_path, monkeypatch):
    """Built loggers write to logs/<subdir>/<stamp>_<prefix>.log."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20250301"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("splitledger.test.builder")
        .subdir("reports")
        .prefix("budget")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.name == "splitledger.test.builder"
    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    handler = built.handlers[0]
    assert isinstance(handler, logging.FileHandler)
    expected = tmp_path / "logs" / "reports" / "20250301_budget.log"
    assert handler.baseFilename == str(expected)
    assert expected.parent.is_dir()
    assert builder.build() is built
    handler.close()


def test_builder_uses_custom_factories(tmp_path, monkeypatch):
    """Formatter and handler factories can be swapped."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    paths = []

    def _file_factory(path, formatter):
        paths.append(path)
        assert formatter is fmt
        return file_handler

    built = (
        logger_module.LoggerBuilder()
        .name("splitledger.test.factories")
        .console(True)
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert paths[0].parent == tmp_path / "logs" / "app"


def test_default_handlers_log_at_info(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_forwards_every_level(monkeypatch, fresh_singletons):
    """The singleton wrapper forwards each call to the built logger."""
    wrapped = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: wrapped,
    )

    app_logger = logger_module.Logger("splitledger")
    app_logger.debug("allocating")
    app_logger.info("allocated")
    app_logger.warning("near limit")
    app_logger.error("over limit")
    app_logger.critical("no database")

    wrapped.debug.assert_called_once_with("allocating")
    wrapped.info.assert_called_once_with("allocated")
    wrapped.warning.assert_called_once_with("near limit")
    wrapped.error.assert_called_once_with("over limit")
    wrapped.critical.assert_called_once_with("no database")
    assert logger_module.Logger("other") is app_logger


def test_app_and_usage_loggers_are_separate_singletons(
    monkeypatch,
    fresh_singletons,
):
    """App and usage loggers are cached independently."""
    subdirs = []

    def _fake_build(self):
        subdirs.append(self._subdir)
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert subdirs == ["app", "usage"]
