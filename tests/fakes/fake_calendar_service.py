"""Fake in-memory de calendario para testes deterministas."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from utils.errors import CalendarEventNotFoundError, CalendarServiceError

if TYPE_CHECKING:
    from app.domain.calendar_resource import CalendarResource


@dataclass
class CalendarCall:
    action: str
    event_id: str | None = None
    resource: CalendarResource | None = None


@dataclass
class FakeCalendarService:
    """Implementa o protocolo sem IO, registrando cada chamada.

    Eventos removidos "por fora" (`vanish`) simulam o usuario apagando o
    evento direto no calendario.
    """

    events: dict[str, CalendarResource] = field(default_factory=dict)
    calls: list[CalendarCall] = field(default_factory=list)
    fail_with: Exception | None = None
    delay_seconds: float = 0.0
    _sequence: int = 0

    async def insert_event(self, resource: CalendarResource) -> str:
        await self._before("insert", None, resource)
        self._sequence += 1
        event_id = f"evt-{self._sequence}"
        self.events[event_id] = resource
        return event_id

    async def update_event(self, event_id: str, resource: CalendarResource) -> str:
        await self._before("update", event_id, resource)
        if event_id not in self.events:
            raise CalendarEventNotFoundError("calendar_event_not_found", status_code=404)
        self.events[event_id] = resource
        return event_id

    async def delete_event(self, event_id: str) -> None:
        await self._before("delete", event_id, None)
        if self.events.pop(event_id, None) is None:
            raise CalendarEventNotFoundError("calendar_event_not_found", status_code=410)

    def vanish(self, event_id: str) -> None:
        self.events.pop(event_id, None)

    def count(self, action: str) -> int:
        return sum(1 for call in self.calls if call.action == action)

    async def _before(
        self,
        action: str,
        event_id: str | None,
        resource: CalendarResource | None,
    ) -> None:
        self.calls.append(CalendarCall(action=action, event_id=event_id, resource=resource))
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.fail_with is not None:
            raise self.fail_with


class FakeSheetsForwarder:
    """Forwarder que apenas registra o que seria enviado."""

    def __init__(self, *, enabled: bool = True, delivered: bool = True) -> None:
        self._enabled = enabled
        self._delivered = delivered
        self.sent: list[tuple[str, dict]] = []

    @property
    def enabled(self) -> bool:
        return self._enabled

    async def forward(self, event_type: str, payload: dict) -> bool:
        if not self._enabled:
            return False
        self.sent.append((event_type, payload))
        return self._delivered


def remote_failure(status_code: int = 500) -> CalendarServiceError:
    return CalendarServiceError("calendar_http_error", status_code=status_code)
