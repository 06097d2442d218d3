"""Fuentes de configuración (implementaciones de `ConfigurationSource`).

- `EnvironmentConfiguration`: entorno del proceso sobre ficheros .env opcionales.
- `MappingConfiguration`: un diccionario cualquiera (tests, hosts embebidos).

Ambas resuelven claves sin distinguir mayúsculas/minúsculas si no hay
coincidencia exacta, igual que la configuración del ecosistema de monitoring.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Mapping

from core.config import parse_env_lines
from core.interfaces.configuration import ConfigurationSource


class MappingConfiguration(ConfigurationSource):
    """Configuración respaldada por un `Mapping[str, str]`."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})
        self._folded = {key.casefold(): key for key in self._values}

    def get(self, key: str) -> str | None:
        if key in self._values:
            return self._values[key]
        original = self._folded.get(key.casefold())
        if original is None:
            return None
        return self._values[original]


class EnvironmentConfiguration(MappingConfiguration):
    """Variables de entorno con prioridad sobre los ficheros .env indicados.

    Los ficheros se aplican en orden (el último gana) y se ignoran si no existen.
    Se toma una instantánea al construir; cambios posteriores del entorno no se ven.
    """

    def __init__(
        self,
        env_files: Iterable[str | Path] = (),
        environ: Mapping[str, str] | None = None,
    ) -> None:
        values: dict[str, str] = {}
        for env_file in env_files:
            path = Path(env_file)
            if path.is_file():
                values.update(parse_env_lines(path.read_text(encoding="utf-8")))
        values.update(os.environ if environ is None else environ)
        super().__init__(values)
