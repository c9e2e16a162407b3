"""Wrapper de httpx.

- Estandariza timeout, headers y redirects para las llamadas salientes.
- `HttpHealthChecker` implementa `HealthChecker`; en tests se le pasa un
  `httpx.AsyncClient` con `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.errors import HealthCheckError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/plain,application/json;q=0.9,*/*;q=0.8",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpHealthChecker:
    """One GET against the configured health endpoint, no retries.

    Any HTTP status is a valid answer; only transport errors fail.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    @property
    def url(self) -> str:
        return self._settings.health_url

    async def _get(self, client: httpx.AsyncClient) -> str:
        response = await client.get(self.url)
        logger.debug("%s answered HTTP %s", self.url, response.status_code)
        return response.text

    async def check(self) -> str:
        logger.debug("GET %s", self.url)
        try:
            if self._client is not None:
                return await self._get(self._client)
            async with build_async_client(self._settings) as client:
                return await self._get(client)
        except httpx.HTTPError as exc:
            raise HealthCheckError(str(exc) or exc.__class__.__name__) from exc
