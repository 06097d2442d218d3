"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y serialización camelCase (la que espera el
  servicio de monitoring) sin acoplar el Core a librerías de I/O.

Nota:
- Estos modelos describen *qué* se registra, no *cómo* se envía.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

MISSING_URL = "0.0.0.0"
"""Placeholder para "no hay dirección alcanzable conocida"."""


class RegistrationRequest(BaseModel):
    """Registro que se envía al directorio de monitoring."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    service_name: str = Field(
        ...,
        min_length=1,
        alias="serviceName",
        description="Nombre bajo el que se registra la instancia.",
    )
    url: str = Field(
        ...,
        min_length=1,
        description="URL monitorizable de la instancia o el placeholder 0.0.0.0.",
    )


class ExistingRegistration(BaseModel):
    """Registro actual del directorio para un nombre (solo lectura)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    service_name: str = Field(
        ...,
        alias="serviceName",
        description="Nombre registrado en el directorio.",
    )
    url: str | None = Field(
        default=None,
        description="URL registrada, si existe.",
    )

    def has_url(self, url: str) -> bool:
        """Compara URLs sin distinguir mayúsculas/minúsculas."""

        return self.url is not None and self.url.lower() == url.lower()


class RegistrationOutcome(str, Enum):
    """Estados terminales del procedimiento de auto-registro."""

    DISABLED = "disabled"
    ALREADY_REGISTERED = "already_registered"
    RENAMED_AND_REGISTERED = "renamed_and_registered"
    REGISTERED = "registered"
    FAILED = "failed"
