"""Cliente REST del servicio de monitoring.

Endpoints usados:
- `GET  /api/urls/{serviceName}` -> registro actual (404 si no existe).
- `POST /api/urls` con `{"serviceName", "url"}` -> alta/actualización.

Un intento por operación; el timeout lo fija `AppSettings`.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import ExistingRegistration, RegistrationRequest
from core.errors import DirectoryLookupError, MonitoringServiceError
from core.interfaces.monitoring import MonitoringDirectory


class MonitoringServiceClient(MonitoringDirectory):
    """Implementa `MonitoringDirectory` sobre `httpx.AsyncClient`."""

    _urls_path = "/api/urls"

    def __init__(
        self,
        base_url: str,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("base_url is required")
        self._base_url = base_url.strip().rstrip("/")
        self._owns_client = client is None
        self._client = client or build_async_client(settings, base_url=self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> MonitoringServiceClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _url(self, path: str) -> str:
        # Absoluto para no depender del base_url de un cliente inyectado.
        return f"{self._base_url}{path}"

    async def get_service(self, service_name: str) -> ExistingRegistration:
        url = self._url(f"{self._urls_path}/{quote(service_name, safe='')}")
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise DirectoryLookupError(service_name, f"transport error: {exc}") from exc

        if response.status_code != 200:
            raise DirectoryLookupError(service_name, f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise DirectoryLookupError(service_name, "invalid JSON payload") from exc
        if not isinstance(payload, dict):
            raise DirectoryLookupError(service_name, "unexpected payload")

        payload.setdefault("serviceName", service_name)
        try:
            return ExistingRegistration.model_validate(payload)
        except ValidationError as exc:
            raise DirectoryLookupError(service_name, "unexpected payload") from exc

    async def monitor_url(self, request: RegistrationRequest) -> None:
        try:
            response = await self._client.post(
                self._url(self._urls_path),
                json=request.model_dump(by_alias=True),
            )
        except httpx.HTTPError as exc:
            raise MonitoringServiceError(
                f"could not reach monitoring service at {self._base_url}: {exc}"
            ) from exc

        if not response.is_success:
            raise MonitoringServiceError(
                f"monitoring service rejected registration of {request.service_name!r}: "
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )
