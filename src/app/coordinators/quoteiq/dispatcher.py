"""Roteamento de eventos QuoteIQ para calendário e planilha.

Tabela fixa por tipo:
- estimate.*          -> encaminhamento para planilha (mesmo tipo)
- schedule.created    -> reconcile_create
- schedule.updated    -> reconcile_update
- schedule.deleted    -> reconcile_delete(payload.doc_id)

Tipos desconhecidos são logados e ignorados. Exceção de handler vira
resultado `failed`; o dispatch em si não propaga falhas de handler.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from app.domain.quoteiq_event import EventEnvelope, EventType
from app.observability import get_correlation_id

if TYPE_CHECKING:
    from app.domain.reconciliation import ReconcileResult
    from app.protocols.sheets_forwarder import SheetsForwarderProtocol
    from app.services.calendar_sync import CalendarSyncEngine

logger = logging.getLogger(__name__)

DispatchOutcome = Literal["processed", "ignored", "failed"]


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Resultado do roteamento de um envelope."""

    event_type: str
    handled: bool
    outcome: DispatchOutcome
    detail: dict[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "handled": self.handled,
            "outcome": self.outcome,
            "detail": self.detail,
        }


_Handler = Callable[[EventEnvelope], Awaitable[tuple[bool, dict[str, Any]]]]


class WebhookDispatcher:
    """Despacha envelopes validados para o handler do tipo."""

    def __init__(
        self,
        *,
        calendar_sync: CalendarSyncEngine,
        sheets_forwarder: SheetsForwarderProtocol,
    ) -> None:
        self._calendar_sync = calendar_sync
        self._sheets_forwarder = sheets_forwarder
        self._routes: dict[EventType, _Handler] = {
            EventType.ESTIMATE_CREATED: self._forward_estimate,
            EventType.ESTIMATE_UPDATED: self._forward_estimate,
            EventType.ESTIMATE_DELETED: self._forward_estimate,
            EventType.SCHEDULE_CREATED: self._schedule_created,
            EventType.SCHEDULE_UPDATED: self._schedule_updated,
            EventType.SCHEDULE_DELETED: self._schedule_deleted,
        }

    async def dispatch(self, envelope: EventEnvelope) -> DispatchResult:
        event_type = envelope.event_type
        if event_type is None:
            logger.warning(
                "quoteiq_event_type_unhandled",
                extra={"event_type": envelope.type, "correlation_id": get_correlation_id()},
            )
            return DispatchResult(event_type=envelope.type, handled=False, outcome="ignored")

        logger.info(
            "quoteiq_event_dispatching",
            extra={"event_type": event_type.value, "correlation_id": get_correlation_id()},
        )
        handler = self._routes[event_type]
        try:
            ok, detail = await handler(envelope)
        except Exception as exc:
            logger.exception(
                "quoteiq_event_handler_failed",
                extra={
                    "event_type": event_type.value,
                    "error_type": type(exc).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )
            return DispatchResult(
                event_type=event_type.value,
                handled=True,
                outcome="failed",
                detail={"error_type": type(exc).__name__},
            )

        return DispatchResult(
            event_type=event_type.value,
            handled=True,
            outcome="processed" if ok else "failed",
            detail=detail,
        )

    async def _forward_estimate(self, envelope: EventEnvelope) -> tuple[bool, dict[str, Any]]:
        if not self._sheets_forwarder.enabled:
            # Planilha não configurada não é falha do evento
            return True, {"forwarded": False, "reason": "sheets_not_configured"}
        forwarded = await self._sheets_forwarder.forward(envelope.type, envelope.payload)
        return forwarded, {"forwarded": forwarded}

    async def _schedule_created(self, envelope: EventEnvelope) -> tuple[bool, dict[str, Any]]:
        return _reconcile_detail(
            await self._calendar_sync.reconcile_create(envelope.quoteiq_payload())
        )

    async def _schedule_updated(self, envelope: EventEnvelope) -> tuple[bool, dict[str, Any]]:
        return _reconcile_detail(
            await self._calendar_sync.reconcile_update(envelope.quoteiq_payload())
        )

    async def _schedule_deleted(self, envelope: EventEnvelope) -> tuple[bool, dict[str, Any]]:
        doc_id = envelope.quoteiq_payload().doc_id
        return _reconcile_detail(await self._calendar_sync.reconcile_delete(doc_id))


def _reconcile_detail(result: ReconcileResult) -> tuple[bool, dict[str, Any]]:
    return result.ok, result.as_dict()


__all__ = ["DispatchOutcome", "DispatchResult", "WebhookDispatcher"]
