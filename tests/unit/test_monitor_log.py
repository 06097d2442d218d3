"""Unit tests for the logging-backed monitor log and application identity."""

from __future__ import annotations

import logging
import sys
import types

import pytest

from adapters.application_identity import current_application_name
from adapters.monitor_log import LOGGER_NAME, LoggingMonitorLog
from core.interfaces.monitoring import LeveledMonitorLog, MonitorLog


def test_logging_monitor_log_satisfies_protocol() -> None:
    assert isinstance(LoggingMonitorLog(), MonitorLog)


def test_leveled_protocol_requires_warning_and_error_methods() -> None:
    class PlainLog:
        def write_monitor(self, component: str, tag: str, message: str) -> None:
            pass

    assert isinstance(LoggingMonitorLog(), LeveledMonitorLog)
    assert isinstance(PlainLog(), MonitorLog)
    assert not isinstance(PlainLog(), LeveledMonitorLog)


def test_write_monitor_emits_info_with_component_and_tag(caplog: pytest.LogCaptureFixture) -> None:
    log = LoggingMonitorLog()

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        log.write_monitor("Auto-registration in monitoring", "pod-1", "hello")

    record = caplog.records[0]
    assert record.levelno == logging.INFO
    assert record.getMessage() == "[Auto-registration in monitoring] [pod-1] hello"
    assert record.monitor_tag == "pod-1"


def test_empty_tag_is_omitted(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        LoggingMonitorLog().write_monitor("component", "", "disabled")

    assert caplog.records[0].getMessage() == "[component] disabled"


def test_write_error_attaches_traceback(caplog: pytest.LogCaptureFixture) -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        error = exc

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        LoggingMonitorLog().write_error("component", "pod-1", "failed", error)

    record = caplog.records[0]
    assert record.levelno == logging.ERROR
    assert record.exc_info is not None
    assert "RuntimeError: boom" in caplog.text


def test_write_warning_level(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        LoggingMonitorLog().write_warning("component", "pod-1", "careful")

    assert caplog.records[0].levelno == logging.WARNING


def test_application_name_from_main_package(monkeypatch: pytest.MonkeyPatch) -> None:
    main = types.ModuleType("__main__")
    main.__spec__ = types.SimpleNamespace(name="orders_service.__main__")  # type: ignore[assignment]
    monkeypatch.setitem(sys.modules, "__main__", main)

    assert current_application_name() == "orders_service"


def test_application_name_from_script(monkeypatch: pytest.MonkeyPatch) -> None:
    main = types.ModuleType("__main__")
    main.__spec__ = None
    monkeypatch.setitem(sys.modules, "__main__", main)
    monkeypatch.setattr(sys, "argv", ["/srv/app/billing_worker.py"])

    assert current_application_name() == "billing_worker"


def test_application_name_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    main = types.ModuleType("__main__")
    main.__spec__ = None
    monkeypatch.setitem(sys.modules, "__main__", main)
    monkeypatch.setattr(sys, "argv", ["-c"])

    assert current_application_name() == "python-app"
