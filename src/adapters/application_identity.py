"""Nombre de la aplicación que hospeda el auto-registro.

Se usa solo como fallback cuando `MyMonitoringName` no está definido.
"""

from __future__ import annotations

import sys
from pathlib import Path

_FALLBACK_NAME = "python-app"


def current_application_name() -> str:
    """Deriva el nombre de la aplicación a partir del módulo `__main__`.

    Orden:
    - paquete de `__main__` cuando se ejecuta con `python -m paquete`;
    - nombre de fichero de `sys.argv[0]` (sin extensión);
    - `python-app` si no hay nada utilizable (intérprete interactivo).
    """

    main = sys.modules.get("__main__")
    spec = getattr(main, "__spec__", None)
    if spec is not None and spec.name:
        name = spec.name
        if name.endswith(".__main__"):
            name = name[: -len(".__main__")]
        if name and name != "__main__":
            return name.split(".")[0]

    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 and argv0 not in {"-c", "-m"}:
        stem = Path(argv0).stem
        if stem:
            return stem

    return _FALLBACK_NAME
