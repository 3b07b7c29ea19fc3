"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check, root
from app.infra.stores.memory_stores import MemoryMappingStore


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_root_reports_running() -> None:
    assert await root() == {"status": "QuoteIQ webhook receiver is running"}


@pytest.mark.asyncio
async def test_health_is_static() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "quoteiq-sync"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_store() -> None:
    request = _build_request_with_state(SimpleNamespace(mapping_store=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["mapping_store"]["error"] == "not_configured"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_when_ping_fails() -> None:
    store = MemoryMappingStore()
    store.ping = AsyncMock(return_value=False)  # type: ignore[method-assign]
    request = _build_request_with_state(SimpleNamespace(mapping_store=store))

    response = await readiness_check(request)

    assert response.status_code == 503


@pytest.mark.asyncio
async def test_readiness_reports_integration_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_SHEETS_WEBHOOK_URL", "https://script.google.com/x")
    request = _build_request_with_state(SimpleNamespace(mapping_store=MemoryMappingStore()))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["mapping_store"]["status"] == "ok"
    assert payload["checks"]["calendar"]["status"] == "disabled"
    assert payload["checks"]["sheets"]["status"] == "ok"
