"""Auto-registration of the running instance in the monitoring service.

A single best-effort pass run at startup: read the registration keys from
configuration, skip when disabled, look up any existing registration under
the resolved name, rename on conflict, submit, log the outcome. Nothing is
retried and nothing is kept afterwards.

Failures past argument validation never reach the caller; they are
classified (`core.errors.classify_failure`) and either ignored (lookup) or
written to the monitor log with their traceback.
"""

from __future__ import annotations

import asyncio
import traceback
import uuid
from dataclasses import dataclass
from typing import Any, Callable

from core.config import (
    DISABLE_AUTO_REGISTRATION_KEY,
    MY_MONITORING_NAME_KEY,
    MY_MONITORING_URL_KEY,
    POD_TAG_KEY,
    parse_bool,
)
from core.domain.models import MISSING_URL, RegistrationOutcome, RegistrationRequest
from core.errors import FailureKind, classify_failure
from core.interfaces.configuration import ConfigurationSource
from core.interfaces.monitoring import (
    DirectoryFactory,
    LeveledMonitorLog,
    MonitoringDirectory,
    MonitorLog,
)

COMPONENT = "Auto-registration in monitoring"


def _default_directory_factory(base_url: str) -> MonitoringDirectory:
    from adapters.monitoring_service import MonitoringServiceClient  # noqa: PLC0415

    return MonitoringServiceClient(base_url)


def _default_application_name() -> str:
    from adapters.application_identity import current_application_name  # noqa: PLC0415

    return current_application_name()


def _warn(log: MonitorLog, tag: str, message: str) -> None:
    if isinstance(log, LeveledMonitorLog):
        log.write_warning(COMPONENT, tag, message)
    else:
        log.write_monitor(COMPONENT, tag, message)


def _error(log: MonitorLog, tag: str, exc: BaseException) -> None:
    if isinstance(log, LeveledMonitorLog):
        log.write_error(COMPONENT, tag, f"Auto-registration failed: {exc!r}", exc)
    else:
        log.write_monitor(COMPONENT, tag, "".join(traceback.format_exception(exc)))


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class ResolvedIdentity:
    """Name and URL this instance reports, before any conflict renaming."""

    name: str
    url: str
    url_missing: bool = False
    pod_tag: str = ""


def is_disabled(configuration: ConfigurationSource) -> bool:
    return parse_bool(configuration.get(DISABLE_AUTO_REGISTRATION_KEY)) is True


def _check_arguments(
    configuration: ConfigurationSource,
    monitoring_service_url: str,
    log: MonitorLog,
) -> bool:
    """Validate the wiring; returns True when registration is disabled.

    The service URL is only required when registration is enabled.
    """

    if configuration is None:
        raise ValueError("configuration is required")
    if log is None:
        raise ValueError("log is required")
    if is_disabled(configuration):
        return True
    if _is_blank(monitoring_service_url):
        raise ValueError("monitoring_service_url is required")
    return False


def resolve_identity(
    configuration: ConfigurationSource,
    application_name: Callable[[], str] | None = None,
) -> ResolvedIdentity:
    """Read `MyMonitoringUrl`/`MyMonitoringName`, applying their fallbacks."""

    url = configuration.get(MY_MONITORING_URL_KEY)
    url_missing = _is_blank(url)
    if url_missing:
        url = MISSING_URL
    name = configuration.get(MY_MONITORING_NAME_KEY)
    if _is_blank(name):
        name = (application_name or _default_application_name)()
    return ResolvedIdentity(
        name=name,
        url=url,
        url_missing=url_missing,
        pod_tag=configuration.get(POD_TAG_KEY) or "",
    )


async def register(
    configuration: ConfigurationSource,
    monitoring_service_url: str,
    log: MonitorLog,
    *,
    application_name: Callable[[], str] | None = None,
    directory_factory: DirectoryFactory | None = None,
) -> RegistrationOutcome:
    """Register the calling application in the monitoring service.

    Args:
        configuration: Source of `DisableAutoRegistrationInMonitoring`,
            `ENV_INFO`, `MyMonitoringUrl` and `MyMonitoringName`.
        monitoring_service_url: Base URL of the monitoring service.
        log: Monitor log sink.
        application_name: Fallback name provider when `MyMonitoringName` is
            unset. Defaults to the `__main__` module name.
        directory_factory: Builds the directory client from the base URL.

    Raises:
        ValueError: `configuration` or `log` is missing, or registration is
            enabled and `monitoring_service_url` is blank.
    """

    if _check_arguments(configuration, monitoring_service_url, log):
        log.write_monitor(COMPONENT, "", "Auto-registration is disabled")
        return RegistrationOutcome.DISABLED

    pod_tag = configuration.get(POD_TAG_KEY) or ""
    directory_factory = directory_factory or _default_directory_factory

    try:
        identity = resolve_identity(configuration, application_name)
        if identity.url_missing:
            _warn(
                log,
                pod_tag,
                f"{MY_MONITORING_URL_KEY} environment variable is not found. "
                f"Using {identity.url} for monitoring registration",
            )

        directory = directory_factory(monitoring_service_url)
    except Exception as exc:
        _error(log, pod_tag, exc)
        return RegistrationOutcome.FAILED

    try:
        outcome = await _register_in(directory, identity.name, identity.url, pod_tag, log)
    except Exception as exc:
        _error(log, pod_tag, exc)
        outcome = RegistrationOutcome.FAILED
    await _close_directory(directory, pod_tag, log)
    return outcome


async def _close_directory(directory: MonitoringDirectory, pod_tag: str, log: MonitorLog) -> None:
    # Closing never changes the outcome of the registration.
    try:
        await directory.aclose()
    except Exception as exc:
        _warn(log, pod_tag, f"Could not close monitoring service client: {exc!r}")


async def _register_in(
    directory: MonitoringDirectory,
    name: str,
    url: str,
    pod_tag: str,
    log: MonitorLog,
) -> RegistrationOutcome:
    outcome = RegistrationOutcome.REGISTERED
    try:
        existing = await directory.get_service(name)
    except Exception as exc:
        if classify_failure(exc) is not FailureKind.IGNORABLE_LOOKUP:
            raise
        existing = None

    if existing is not None:
        if existing.has_url(url):
            log.write_monitor(
                COMPONENT,
                pod_tag,
                "Service is already registered in monitoring with such url. Skipping.",
            )
            return RegistrationOutcome.ALREADY_REGISTERED

        # A record stuck at the placeholder is not treated as a conflict.
        if existing.url != MISSING_URL:
            _warn(log, pod_tag, f"There is a registration for {name} in monitoring service!")
            url = MISSING_URL
            instance_tag = pod_tag or str(uuid.uuid4())
            name = f"{name}-{instance_tag}"
            outcome = RegistrationOutcome.RENAMED_AND_REGISTERED

    await directory.monitor_url(RegistrationRequest(service_name=name, url=url))
    log.write_monitor(
        COMPONENT,
        pod_tag,
        f"Auto-registered in Monitoring with name {name} on {url}",
    )
    return outcome


_background_tasks: set[asyncio.Task[Any]] = set()


def start_registration(
    configuration: ConfigurationSource,
    monitoring_service_url: str,
    log: MonitorLog,
    **kwargs: Any,
) -> asyncio.Task[RegistrationOutcome]:
    """Schedule `register` on the running loop without awaiting it.

    Invalid arguments raise here, before scheduling, with the same rules as
    `register`. The task is kept referenced until it finishes.
    """

    _check_arguments(configuration, monitoring_service_url, log)

    task = asyncio.get_running_loop().create_task(
        register(configuration, monitoring_service_url, log, **kwargs)
    )
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task
