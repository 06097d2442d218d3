"""Contrato de la fuente de configuración.

Por qué no usar `AppSettings` directamente:
- Las claves del auto-registro (`MyMonitoringUrl`, `ENV_INFO`, ...) las fija
  el ecosistema de monitoring, no esta librería; el host decide de dónde salen
  (entorno, .env, diccionario propio).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfigurationSource(Protocol):
    """Lectura clave/valor de solo lectura."""

    def get(self, key: str) -> str | None:
        """Devuelve el valor de `key` o `None` si no está definido."""

        ...
