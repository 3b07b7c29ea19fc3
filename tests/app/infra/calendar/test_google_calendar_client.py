"""Testes do GoogleCalendarClient sem rede.

O client é criado sem passar pelo `__init__` (que exige credencial real);
as chamadas síncronas à API são substituídas por funções locais.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

import pytest
from googleapiclient.errors import HttpError

from app.domain.calendar_resource import CalendarResource
from app.infra.calendar import google_calendar_client as module
from app.infra.calendar.google_calendar_client import (
    GoogleCalendarClient,
    create_google_calendar_client,
)
from utils.errors import (
    CalendarEventNotFoundError,
    CalendarServiceError,
    CalendarTimeoutError,
)


def _resource() -> CalendarResource:
    return CalendarResource(
        summary="Appointment - Alice",
        description="Customer: Alice",
        start=datetime(2025, 1, 10, 15, tzinfo=UTC),
        end=datetime(2025, 1, 10, 16, tzinfo=UTC),
        location="1 Main St",
        attendees=("alice@example.com",),
    )


def _client(timeout_seconds: float = 1.0) -> GoogleCalendarClient:
    client = object.__new__(GoogleCalendarClient)
    client._calendar_id = "primary"
    client._credentials = None
    client._service = None
    client._timeout_seconds = timeout_seconds
    return client


def _http_error(status: int) -> HttpError:
    return HttpError(resp=SimpleNamespace(status=status, reason="err"), content=b"error")


@pytest.mark.asyncio
async def test_insert_event_sends_google_body(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}

    def _fake_insert(self: GoogleCalendarClient, body: dict[str, Any]) -> dict[str, Any]:
        captured.update(body)
        return {"id": "E1"}

    monkeypatch.setattr(GoogleCalendarClient, "_insert_event_sync", _fake_insert)

    event_id = await _client().insert_event(_resource())

    assert event_id == "E1"
    assert captured["summary"] == "Appointment - Alice"
    assert captured["start"] == {"dateTime": "2025-01-10T15:00:00.000Z", "timeZone": "UTC"}
    assert captured["attendees"] == [{"email": "alice@example.com"}]


@pytest.mark.asyncio
async def test_insert_without_id_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(GoogleCalendarClient, "_insert_event_sync", lambda self, body: {})

    with pytest.raises(CalendarServiceError, match="missing_event_id"):
        await _client().insert_event(_resource())


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 410])
async def test_update_not_found_maps_to_specific_error(
    monkeypatch: pytest.MonkeyPatch,
    status: int,
) -> None:
    def _fake_update(self: GoogleCalendarClient, event_id: str, body: dict[str, Any]) -> None:
        raise _http_error(status)

    monkeypatch.setattr(GoogleCalendarClient, "_update_event_sync", _fake_update)

    with pytest.raises(CalendarEventNotFoundError) as exc_info:
        await _client().update_event("E_old", _resource())

    assert exc_info.value.status_code == status


@pytest.mark.asyncio
async def test_update_returns_event_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        GoogleCalendarClient,
        "_update_event_sync",
        lambda self, event_id, body: {"id": event_id},
    )

    assert await _client().update_event("E1", _resource()) == "E1"


@pytest.mark.asyncio
async def test_other_http_errors_map_to_service_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_delete(self: GoogleCalendarClient, event_id: str) -> None:
        raise _http_error(500)

    monkeypatch.setattr(GoogleCalendarClient, "_delete_event_sync", _fake_delete)

    with pytest.raises(CalendarServiceError) as exc_info:
        await _client().delete_event("E1")

    assert not isinstance(exc_info.value, CalendarEventNotFoundError)
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_slow_call_times_out(monkeypatch: pytest.MonkeyPatch) -> None:
    def _slow_delete(self: GoogleCalendarClient, event_id: str) -> None:
        time.sleep(0.3)

    monkeypatch.setattr(GoogleCalendarClient, "_delete_event_sync", _slow_delete)

    with pytest.raises(CalendarTimeoutError):
        await _client(timeout_seconds=0.05).delete_event("E1")


@pytest.mark.asyncio
async def test_insert_applied_after_timeout_is_logged(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    finished = threading.Event()

    def _slow_insert(self: GoogleCalendarClient, body: dict[str, Any]) -> dict[str, Any]:
        time.sleep(0.2)
        finished.set()
        return {"id": "E9"}

    monkeypatch.setattr(GoogleCalendarClient, "_insert_event_sync", _slow_insert)
    caplog.set_level(logging.WARNING, logger=module.logger.name)

    with pytest.raises(CalendarTimeoutError):
        await _client(timeout_seconds=0.05).insert_event(_resource())
    await asyncio.to_thread(finished.wait, 2.0)
    await asyncio.sleep(0.1)

    records = [r for r in caplog.records if r.getMessage() == "google_calendar_late_completion"]
    assert len(records) == 1
    assert records[0].event_id == "E9"
    assert records[0].action == "insert_event"


def test_factory_returns_none_without_credentials() -> None:
    assert (
        create_google_calendar_client(
            calendar_id="primary",
            credentials_json=None,
            timeout_seconds=10.0,
        )
        is None
    )


def test_factory_returns_none_for_invalid_credentials() -> None:
    assert (
        create_google_calendar_client(
            calendar_id="primary",
            credentials_json="{not json",
            timeout_seconds=10.0,
        )
        is None
    )


def test_factory_builds_client(monkeypatch: pytest.MonkeyPatch) -> None:
    built: dict[str, Any] = {}

    def _fake_init(self: GoogleCalendarClient, **kwargs: Any) -> None:
        built.update(kwargs)

    monkeypatch.setattr(module.GoogleCalendarClient, "__init__", _fake_init)

    client = create_google_calendar_client(
        calendar_id="team@example.com",
        credentials_json='{"type": "service_account"}',
        timeout_seconds=5.0,
    )

    assert isinstance(client, GoogleCalendarClient)
    assert built == {
        "calendar_id": "team@example.com",
        "credentials_json": '{"type": "service_account"}',
        "timeout_seconds": 5.0,
    }
