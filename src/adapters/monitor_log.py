"""Log de monitor sobre `logging` de la stdlib.

Por qué `logging`:
- El host ya tiene su propia configuración de logging; el auto-registro solo
  emite registros en el logger `monitoring.autoreg` y deja que el host decida
  dónde acaban.
- Para la CLI, `configure_logging` instala un `RichHandler`.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from core.interfaces.monitoring import LeveledMonitorLog

LOGGER_NAME = "monitoring.autoreg"


class LoggingMonitorLog(LeveledMonitorLog):
    """Escribe entradas `[component] [tag] message` en un logger estándar."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def write_monitor(self, component: str, tag: str, message: str) -> None:
        self._log(logging.INFO, component, tag, message)

    def write_warning(self, component: str, tag: str, message: str) -> None:
        self._log(logging.WARNING, component, tag, message)

    def write_error(self, component: str, tag: str, message: str, exc: BaseException) -> None:
        self._log(logging.ERROR, component, tag, message, exc_info=exc)

    def _log(
        self,
        level: int,
        component: str,
        tag: str,
        message: str,
        exc_info: BaseException | None = None,
    ) -> None:
        prefix = f"[{component}] [{tag}]" if tag else f"[{component}]"
        self._logger.log(
            level,
            "%s %s",
            prefix,
            message,
            exc_info=exc_info,
            extra={"monitor_component": component, "monitor_tag": tag},
        )


def configure_logging(level: str | int = "INFO") -> None:
    """Configura el root logger con `RichHandler` (uso interactivo/CLI)."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
