"""CLI de diagnóstico (Typer).

Por qué solo diagnóstico:
- El auto-registro es una librería que llama el host al arrancar; la CLI
  sirve para comprobar qué registraría una instancia sin registrarla.
"""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.monitor_log import configure_logging
from cli import doctor
from cli.ui_components import print_banner
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Monitoring auto-registration tools.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def _main(
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Skip the banner."),
) -> None:
    configure_logging(AppSettings().log_level.upper())
    if not quiet:
        print_banner(_console)


def run() -> None:
    app()
