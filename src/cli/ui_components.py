"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

_STATUS_STYLES = {
    "OK": "green",
    "ENABLED": "green",
    "OPTIONAL": "dim",
    "DISABLED": "yellow",
    "WARN": "yellow",
    "MISSING": "red",
    "FAIL": "red",
}


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("monitoring-autoreg", style="bold cyan")
    subtitle = Text("Auto-registro en el servicio de monitoring", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_doctor_table(rows: Iterable[tuple[str, str, str]]) -> Table:
    """Tabla de diagnóstico: (check, status, detalle)."""

    table = Table(title="Monitoring Auto-registration Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    for check, status, details in rows:
        table.add_row(check, Text(status, style=_STATUS_STYLES.get(status, "white")), details)
    return table
