"""Contratos del directorio de monitoring y del log de monitor.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el cliente HTTP y el log por fakes en tests sin acoplar
  el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from core.domain.models import ExistingRegistration, RegistrationRequest


@runtime_checkable
class MonitoringDirectory(Protocol):
    """Contrato mínimo del directorio de servicios monitorizados.

    Reglas de diseño:
    - Ambos métodos son asíncronos porque hacen I/O (HTTP).
    - `get_service` lanza `DirectoryLookupError` si no hay registro.
    - Cada operación se intenta una sola vez (sin reintentos).
    """

    async def get_service(self, service_name: str) -> ExistingRegistration:
        """Devuelve el registro actual para `service_name`."""

        ...

    async def monitor_url(self, request: RegistrationRequest) -> None:
        """Registra (o actualiza) la URL monitorizada de un servicio."""

        ...

    async def aclose(self) -> None:
        ...


@runtime_checkable
class MonitorLog(Protocol):
    """Sumidero de entradas de log estilo monitor.

    `write_monitor` es fire-and-forget y nunca lanza.
    """

    def write_monitor(self, component: str, tag: str, message: str) -> None:
        ...


@runtime_checkable
class LeveledMonitorLog(MonitorLog, Protocol):
    """`MonitorLog` que además distingue avisos y errores.

    Si el sumidero no lo implementa, avisos y errores (con su traceback como
    texto) se escriben vía `write_monitor`.
    """

    def write_warning(self, component: str, tag: str, message: str) -> None:
        ...

    def write_error(self, component: str, tag: str, message: str, exc: BaseException) -> None:
        ...


DirectoryFactory = Callable[[str], MonitoringDirectory]
"""Construye un `MonitoringDirectory` a partir de la URL base del servicio."""
