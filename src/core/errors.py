"""Errores del Core y su clasificación.

Por qué una clasificación explícita:
- El auto-registro distingue dos tipos de fallo: un lookup que no encuentra
  (o no alcanza) el registro, que se ignora, y cualquier otro fallo, que se
  registra en el log y se suprime.
- Los errores de cableado (config o log ausentes) son `ValueError` y no pasan
  por aquí: se propagan al llamador.
"""

from __future__ import annotations

from enum import Enum


class MonitoringError(Exception):
    """Error base de la integración con el servicio de monitoring."""


class DirectoryLookupError(MonitoringError):
    """El directorio no devolvió un registro para el nombre consultado."""

    def __init__(self, service_name: str, reason: str) -> None:
        super().__init__(f"lookup of {service_name!r} failed: {reason}")
        self.service_name = service_name
        self.reason = reason


class MonitoringServiceError(MonitoringError):
    """Fallo de transporte o respuesta no exitosa del servicio de monitoring."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FailureKind(str, Enum):
    IGNORABLE_LOOKUP = "ignorable_lookup"
    FATAL_TO_LOG = "fatal_to_log"


def classify_failure(exc: BaseException) -> FailureKind:
    """Clasifica un fallo del registro en ignorable o a registrar."""

    if isinstance(exc, DirectoryLookupError):
        return FailureKind.IGNORABLE_LOOKUP
    return FailureKind.FATAL_TO_LOG
