"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.configuration import ConfigurationSource
from core.interfaces.monitoring import (
    DirectoryFactory,
    LeveledMonitorLog,
    MonitoringDirectory,
    MonitorLog,
)

__all__ = [
    "ConfigurationSource",
    "DirectoryFactory",
    "LeveledMonitorLog",
    "MonitoringDirectory",
    "MonitorLog",
]
