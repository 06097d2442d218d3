"""Doctor command for auto-registration diagnostics."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.configuration import EnvironmentConfiguration
from adapters.monitoring_service import MonitoringServiceClient
from cli.ui_components import build_doctor_table
from core.config import AppSettings
from core.errors import DirectoryLookupError
from core.interfaces.monitoring import DirectoryFactory
from core.services.auto_registration import is_disabled, resolve_identity

app = typer.Typer(no_args_is_help=True, help="Auto-registration diagnostics and configuration checks.")

_console = Console()

DIRECTORY_FACTORY_KEY = "directory_factory"


def _directory_factory(ctx: typer.Context) -> DirectoryFactory:
    """Factory from `ctx.obj` (embedding hosts, tests) or the HTTP client."""

    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return obj.get(DIRECTORY_FACTORY_KEY, MonitoringServiceClient)


async def _check_lookup(
    directory_factory: DirectoryFactory, service_url: str, name: str
) -> tuple[bool, str]:
    """Look up `name` without registering anything."""

    directory = directory_factory(service_url)
    try:
        existing = await directory.get_service(name)
    except DirectoryLookupError as exc:
        return True, f"No registration ({exc.reason})"
    except Exception as exc:
        return False, str(exc)
    finally:
        await directory.aclose()
    return True, f"Registered on {existing.url}"


@app.command()
def run(
    ctx: typer.Context,
    service_url: Optional[str] = typer.Option(
        None,
        "--service-url",
        "-s",
        help="Monitoring service base URL (defaults to MONITORING_AUTOREG_SERVICE_URL).",
    ),
    env_file: list[Path] = typer.Option(
        [],
        "--env-file",
        help="Extra .env files to read registration keys from.",
    ),
) -> None:
    """Show how the instance would register, without registering it."""

    settings = AppSettings()
    service_url = service_url or settings.service_url
    configuration = EnvironmentConfiguration(env_files=env_file)

    disabled = is_disabled(configuration)
    identity = resolve_identity(configuration)

    rows: list[tuple[str, str, str]] = []
    rows.append(("Auto-registration", "DISABLED" if disabled else "ENABLED", "DisableAutoRegistrationInMonitoring"))
    rows.append(("Pod tag", "OK" if identity.pod_tag else "OPTIONAL", identity.pod_tag or "ENV_INFO not set"))
    if identity.url_missing:
        rows.append(("Monitoring URL", "WARN", f"MyMonitoringUrl not set -> {identity.url}"))
    else:
        rows.append(("Monitoring URL", "OK", identity.url))
    rows.append(("Monitoring name", "OK", identity.name))

    ok_lookup = True
    if not service_url:
        rows.append(("Monitoring service", "MISSING", "Pass --service-url or set MONITORING_AUTOREG_SERVICE_URL"))
    elif not disabled:
        ok_lookup, detail = asyncio.run(
            _check_lookup(_directory_factory(ctx), service_url, identity.name)
        )
        rows.append(("Directory lookup", "OK" if ok_lookup else "FAIL", detail))

    _console.print(build_doctor_table(rows))

    if not ok_lookup:
        _console.print(
            "\n[yellow]Note:[/yellow] Registration failures are only logged; the host application keeps starting."
        )
        raise typer.Exit(code=1)
