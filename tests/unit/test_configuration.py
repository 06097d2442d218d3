"""Unit tests for configuration sources and settings parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from adapters.configuration import EnvironmentConfiguration, MappingConfiguration
from core.config import AppSettings, parse_bool, parse_env_lines


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("true", True),
        ("TRUE", True),
        ("  True\n", True),
        ("false", False),
        ("False", False),
        ("1", None),
        ("yes", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_bool(value: str | None, expected: bool | None) -> None:
    assert parse_bool(value) is expected


def test_parse_env_lines_skips_comments_and_strips_quotes() -> None:
    text = """
    # comment
    MyMonitoringUrl="http://orders:5000"
    MyMonitoringName='orders'
    not a pair
    =orphan
    ENV_INFO=pod=1
    """

    assert parse_env_lines(text) == {
        "MyMonitoringUrl": "http://orders:5000",
        "MyMonitoringName": "orders",
        "ENV_INFO": "pod=1",
    }


def test_mapping_configuration_exact_match_wins() -> None:
    config = MappingConfiguration({"ENV_INFO": "upper", "env_info": "lower"})

    assert config.get("ENV_INFO") == "upper"
    assert config.get("env_info") == "lower"


def test_mapping_configuration_falls_back_to_case_insensitive() -> None:
    config = MappingConfiguration({"MYMONITORINGURL": "http://x"})

    assert config.get("MyMonitoringUrl") == "http://x"
    assert config.get("MyMonitoringName") is None


def test_environment_configuration_overlays_env_files(tmp_path: Path) -> None:
    first = tmp_path / "base.env"
    first.write_text("MyMonitoringName=base\nMyMonitoringUrl=http://base\n", encoding="utf-8")
    second = tmp_path / "local.env"
    second.write_text("MyMonitoringName=local\n", encoding="utf-8")

    config = EnvironmentConfiguration(
        env_files=[first, second, tmp_path / "missing.env"],
        environ={"MyMonitoringUrl": "http://from-env"},
    )

    assert config.get("MyMonitoringName") == "local"
    assert config.get("MyMonitoringUrl") == "http://from-env"


def test_environment_configuration_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV_INFO", "pod-42")

    assert EnvironmentConfiguration().get("ENV_INFO") == "pod-42"


def test_app_settings_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONITORING_AUTOREG_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("MONITORING_AUTOREG_SERVICE_URL", "http://monitoring.local")

    settings = AppSettings(_env_file=None)

    assert settings.http_timeout_seconds == 2.5
    assert settings.service_url == "http://monitoring.local"
    assert settings.log_level == "INFO"


def test_app_settings_rejects_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONITORING_AUTOREG_HTTP_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValueError):
        AppSettings(_env_file=None)
