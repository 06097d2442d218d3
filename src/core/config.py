"""Configuración del Core.

Por qué aquí:
- Centraliza los ajustes propios de la librería (pydantic-settings): timeouts,
  User-Agent, URL por defecto del servicio de monitoring, nivel de log.
- Las claves del auto-registro se leen aparte, vía `ConfigurationSource`.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DISABLE_AUTO_REGISTRATION_KEY = "DisableAutoRegistrationInMonitoring"
POD_TAG_KEY = "ENV_INFO"
MY_MONITORING_URL_KEY = "MyMonitoringUrl"
MY_MONITORING_NAME_KEY = "MyMonitoringName"


def parse_env_lines(text: str) -> dict[str, str]:
    """Parsea el contenido de un fichero .env (KEY=VALUE, `#` comenta)."""

    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def parse_bool(value: str | None) -> bool | None:
    """Interpreta "true"/"false" (sin distinguir mayúsculas); otro valor -> None."""

    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return None


class AppSettings(BaseSettings):
    """Configuración central de la librería.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="MONITORING_AUTOREG_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request al servicio de monitoring (segundos).",
    )
    user_agent: str = Field(
        default="monitoring-autoreg/0.1",
        min_length=1,
        description="User-Agent para peticiones al servicio de monitoring.",
    )
    service_url: str | None = Field(
        default=None,
        description="URL base del servicio de monitoring (por defecto para la CLI).",
    )
    log_level: str = Field(
        default="INFO",
        min_length=1,
        description="Nivel de logging para la CLI.",
    )
