"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def _freeze_log_location(monkeypatch, root) -> None:
    monkeypatch.setattr(logger_module, "get_project_root", lambda: root)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20250301"),
    )


def test_build_writes_to_dated_file_under_subdir(tmp_path, monkeypatch):
    """Built loggers should log to logs/<subdir>/<date>_<prefix>.log."""
    _freeze_log_location(monkeypatch, tmp_path)

    builder = (
        logger_module.LoggerBuilder()
        .name("summary.test.build")
        .subdir("summary")
        .prefix("summary_logs")
        .console(True)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    file_handlers = [
        handler
        for handler in built.handlers
        if isinstance(handler, logging.FileHandler)
    ]
    expected = tmp_path / "logs" / "summary" / "20250301_summary_logs.log"
    assert [handler.baseFilename for handler in file_handlers] == [
        str(expected)
    ]
    assert len(built.handlers) == 2
    assert builder.build() is built


def test_build_without_console_only_adds_file_handler(tmp_path, monkeypatch):
    _freeze_log_location(monkeypatch, tmp_path)

    built = (
        logger_module.LoggerBuilder()
        .name("summary.test.quiet")
        .subdir("usage")
        .prefix("usage_logs")
        .console(False)
        .build()
    )

    assert len(built.handlers) == 1
    assert isinstance(built.handlers[0], logging.FileHandler)


def test_custom_factories_are_used(tmp_path, monkeypatch):
    """Formatter and handler factories should be pluggable."""
    _freeze_log_location(monkeypatch, tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    seen = {}

    def _file_factory(path, formatter):
        seen["path"] = path
        seen["formatter"] = formatter
        return file_handler

    built = (
        logger_module.LoggerBuilder()
        .name("summary.test.factories")
        .console(False)
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .build()
    )

    assert built.handlers == [file_handler]
    assert seen["formatter"] is fmt
    assert seen["path"].name == "20250301_app_logs.log"


def test_default_handlers_apply_formatter_and_info_level(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()

    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "summary.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    for handler in (file_handler, console_handler):
        assert handler.level == logging.INFO
        assert handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_forwards_messages(monkeypatch):
    """Logger methods should delegate to the wrapped logging.Logger."""
    wrapped = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: wrapped,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("summary.test.wrapper")
    wrapper.info("fetched %s", 3)
    wrapper.warning("unknown wallet")
    wrapper.error("rejected")
    wrapper.debug("rows")
    wrapper.critical("down")

    wrapped.info.assert_called_once_with("fetched %s", 3)
    wrapped.warning.assert_called_once_with("unknown wallet")
    wrapped.error.assert_called_once_with("rejected")
    wrapped.debug.assert_called_once_with("rows")
    wrapped.critical.assert_called_once_with("down")
    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    built_names = []

    def _fake_build(self):
        built_names.append((self._name, self._subdir, self._console))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_names == [
        ("summary.app", "app", True),
        ("summary.usage", "usage", False),
    ]
