"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base_url, timeouts y headers para todas las llamadas a la API.
- Facilita testeo: acepta un `transport` (p.ej. `httpx.MockTransport`).
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando a la API de AquaMonitor."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxFetcher:
    """Implementación de `core.interfaces.fetcher.Fetcher` sobre httpx.

    Abre un cliente por llamada: cada loader es dueño de su propio request,
    sin caché ni deduplicación entre instancias.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self, path: str) -> httpx.Response:
        async with build_async_client(self._settings, transport=self._transport) as client:
            return await client.get(path)
