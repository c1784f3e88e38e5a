"""Tests for the httpx-backed fetch capability."""

from __future__ import annotations

import asyncio

import httpx

from adapters.http_client import HttpxFetcher, build_async_client
from core.config import AppSettings
from core.errors import LoadErrorKind
from core.interfaces.fetcher import Fetcher
from core.services.resource_loader import facilities_loader, load_collection


def _settings() -> AppSettings:
    return AppSettings(_env_file=None, api_base_url="http://aqua.test", user_agent="tests/1.0")


def test_fetcher_satisfies_protocol() -> None:
    assert isinstance(HttpxFetcher(_settings()), Fetcher)


def test_client_uses_settings() -> None:
    async def scenario() -> httpx.AsyncClient:
        async with build_async_client(_settings(), extra_headers={"X-Trace": "1"}) as client:
            return client

    client = asyncio.run(scenario())

    assert client.base_url.host == "aqua.test"
    assert client.headers["User-Agent"] == "tests/1.0"
    assert client.headers["Accept"] == "application/json"
    assert client.headers["X-Trace"] == "1"


def test_fetch_issues_get_against_base_url() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id_instalacion": 1}])

    fetcher = HttpxFetcher(_settings(), transport=httpx.MockTransport(handler))

    state = asyncio.run(load_collection(facilities_loader(fetcher)))

    assert list(state.items) == [{"id_instalacion": 1}]
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == "http://aqua.test/api/instalaciones"


def test_transport_failure_becomes_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("sin ruta al host", request=request)

    fetcher = HttpxFetcher(_settings(), transport=httpx.MockTransport(handler))

    state = asyncio.run(load_collection(facilities_loader(fetcher)))

    assert state.error_kind is LoadErrorKind.NETWORK
    assert state.error == "Error al cargar las instalaciones"
