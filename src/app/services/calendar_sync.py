"""Engine de reconciliação de schedules QuoteIQ com o calendário.

Estratégia canônica: o vínculo doc_id -> evento vem do store de mapeamento
(nunca de busca textual no calendário, que é imprecisa).

Política de erros:
- Calendário não configurado, store indisponível ou horário incompleto:
  skip, sem chamada externa.
- Evento sumiu do calendário durante update: remove o mapeamento e cria de
  novo, uma única vez.
- Falha remota no create: propaga para o chamador decidir retry.
- Falha remota no update/delete: log + resultado `failed`, sem exceção.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.domain.calendar_resource import (
    CalendarResource,
    build_calendar_resource,
    time_bounds_issue,
)
from app.domain.reconciliation import ReconcileAction, ReconcileResult
from app.observability import get_correlation_id, record_latency, record_reconcile_outcome
from app.services.keyed_lock import KeyedLock
from config.logging import log_fallback
from utils.errors import (
    CalendarEventNotFoundError,
    CalendarServiceError,
    CalendarTimeoutError,
    InfrastructureError,
)

if TYPE_CHECKING:
    from app.domain.quoteiq_event import QuoteIQPayload
    from app.protocols.calendar_service import CalendarServiceProtocol
    from app.protocols.mapping_store import AsyncMappingStoreProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "calendar_sync"


class CalendarSyncEngine:
    """Cria, atualiza e remove um evento de calendário por doc_id.

    Args:
        calendar: Client do calendário; None desliga a sincronização
        mapping_store: Store doc_id -> event_id; None também desliga
        locks: Lock por doc_id (injetável para compartilhar entre engines)
    """

    def __init__(
        self,
        *,
        calendar: CalendarServiceProtocol | None,
        mapping_store: AsyncMappingStoreProtocol | None,
        locks: KeyedLock | None = None,
    ) -> None:
        self._calendar = calendar
        self._mapping_store = mapping_store
        self._locks = locks or KeyedLock()

    @property
    def enabled(self) -> bool:
        return self._calendar is not None and self._mapping_store is not None

    async def reconcile_create(self, payload: QuoteIQPayload) -> ReconcileResult:
        """Cria o evento do schedule e grava o mapeamento.

        Reentrega de um create já aplicado vira update do evento mapeado,
        para nunca existir dois eventos por doc_id.

        Raises:
            CalendarServiceError: falha remota (inclui timeout).
            InfrastructureError: falha do store de mapeamento.
        """
        prepared = self._prepare(payload, ReconcileAction.CREATE)
        if isinstance(prepared, ReconcileResult):
            return prepared

        doc_id = payload.doc_id
        started_at = time.perf_counter()
        try:
            async with self._locks.acquire(doc_id):
                existing = await self._mapping_store.get(doc_id) if doc_id else None
                if existing is not None:
                    logger.info(
                        "calendar_create_redelivered",
                        extra={"component": _COMPONENT, "doc_id": doc_id, "event_id": existing},
                    )
                    result = await self._update_mapped(doc_id, existing, prepared)
                else:
                    result = await self._create(doc_id, prepared)
        except Exception as exc:
            self._finish(
                "create",
                ReconcileResult.failed(ReconcileAction.CREATE, _failure_reason(exc), doc_id=doc_id),
                started_at,
            )
            raise
        return self._finish("create", result, started_at)

    async def reconcile_update(self, payload: QuoteIQPayload) -> ReconcileResult:
        """Atualiza o evento mapeado; sem mapeamento, cria."""
        prepared = self._prepare(payload, ReconcileAction.UPDATE)
        if isinstance(prepared, ReconcileResult):
            return prepared

        doc_id = payload.doc_id
        started_at = time.perf_counter()
        try:
            async with self._locks.acquire(doc_id):
                existing = await self._mapping_store.get(doc_id) if doc_id else None
                if existing is None:
                    log_fallback(logger, _COMPONENT, reason="mapping_not_found", doc_id=doc_id)
                    result = await self._create(doc_id, prepared, fallback=True)
                else:
                    result = await self._update_mapped(doc_id, existing, prepared)
        except Exception as exc:
            self._log_failure("update", doc_id, exc)
            result = ReconcileResult.failed(
                ReconcileAction.UPDATE, _failure_reason(exc), doc_id=doc_id
            )
        return self._finish("update", result, started_at)

    async def reconcile_delete(self, doc_id: str | None) -> ReconcileResult:
        """Remove o evento mapeado e, em qualquer desfecho, o mapeamento."""
        if self._calendar is None:
            return self._skip(ReconcileAction.DELETE, "calendar_not_configured", doc_id)
        if self._mapping_store is None:
            return self._skip(ReconcileAction.DELETE, "mapping_store_unavailable", doc_id)
        if not doc_id:
            return self._skip(ReconcileAction.DELETE, "missing_doc_id", doc_id)

        started_at = time.perf_counter()
        async with self._locks.acquire(doc_id):
            try:
                event_id = await self._mapping_store.get(doc_id)
            except Exception as exc:
                self._log_failure("delete", doc_id, exc)
                return self._finish(
                    "delete",
                    ReconcileResult.failed(
                        ReconcileAction.DELETE, _failure_reason(exc), doc_id=doc_id
                    ),
                    started_at,
                )
            if event_id is None:
                return self._skip(ReconcileAction.DELETE, "mapping_not_found", doc_id)

            result = await self._delete_mapped(doc_id, event_id)
            try:
                await self._mapping_store.remove(doc_id)
            except Exception as exc:
                self._log_failure("delete", doc_id, exc)
                if result.ok:
                    result = ReconcileResult.failed(
                        ReconcileAction.DELETE,
                        _failure_reason(exc),
                        doc_id=doc_id,
                        event_id=event_id,
                    )
        return self._finish("delete", result, started_at)

    async def _create(
        self,
        doc_id: str | None,
        resource: CalendarResource,
        *,
        fallback: bool = False,
    ) -> ReconcileResult:
        event_id = await self._calendar.insert_event(resource)  # type: ignore[union-attr]
        if doc_id:
            await self._mapping_store.put(doc_id, event_id)
        else:
            logger.warning(
                "calendar_event_created_without_doc_id",
                extra={"component": _COMPONENT, "event_id": event_id},
            )
        logger.info(
            "calendar_event_created",
            extra={
                "component": _COMPONENT,
                "doc_id": doc_id,
                "event_id": event_id,
                "fallback": fallback,
            },
        )
        return ReconcileResult.success(
            ReconcileAction.CREATE, doc_id=doc_id, event_id=event_id, fallback=fallback
        )

    async def _update_mapped(
        self,
        doc_id: str,
        event_id: str,
        resource: CalendarResource,
    ) -> ReconcileResult:
        try:
            await self._calendar.update_event(event_id, resource)  # type: ignore[union-attr]
        except CalendarEventNotFoundError:
            await self._mapping_store.remove(doc_id)
            log_fallback(logger, _COMPONENT, reason="event_not_found", doc_id=doc_id)
            return await self._create(doc_id, resource, fallback=True)
        logger.info(
            "calendar_event_updated",
            extra={"component": _COMPONENT, "doc_id": doc_id, "event_id": event_id},
        )
        return ReconcileResult.success(ReconcileAction.UPDATE, doc_id=doc_id, event_id=event_id)

    async def _delete_mapped(self, doc_id: str, event_id: str) -> ReconcileResult:
        try:
            await self._calendar.delete_event(event_id)  # type: ignore[union-attr]
        except CalendarEventNotFoundError:
            logger.info(
                "calendar_event_already_deleted",
                extra={"component": _COMPONENT, "doc_id": doc_id, "event_id": event_id},
            )
        except Exception as exc:
            self._log_failure("delete", doc_id, exc)
            return ReconcileResult.failed(
                ReconcileAction.DELETE, _failure_reason(exc), doc_id=doc_id, event_id=event_id
            )
        else:
            logger.info(
                "calendar_event_deleted",
                extra={"component": _COMPONENT, "doc_id": doc_id, "event_id": event_id},
            )
        return ReconcileResult.success(ReconcileAction.DELETE, doc_id=doc_id, event_id=event_id)

    def _prepare(
        self,
        payload: QuoteIQPayload,
        action: ReconcileAction,
    ) -> CalendarResource | ReconcileResult:
        if self._calendar is None:
            return self._skip(action, "calendar_not_configured", payload.doc_id)
        if self._mapping_store is None:
            return self._skip(action, "mapping_store_unavailable", payload.doc_id)
        resource = build_calendar_resource(payload)
        if resource is None:
            return self._skip(action, time_bounds_issue(payload), payload.doc_id)
        return resource

    def _skip(self, action: ReconcileAction, reason: str, doc_id: str | None) -> ReconcileResult:
        logger.info(
            "calendar_sync_skipped",
            extra={
                "component": _COMPONENT,
                "action": action.value,
                "doc_id": doc_id,
                "reason": reason,
            },
        )
        result = ReconcileResult.skipped(reason, doc_id=doc_id)
        record_reconcile_outcome(action=action.value, status=result.status.value, reason=reason)
        return result

    def _finish(self, operation: str, result: ReconcileResult, started_at: float) -> ReconcileResult:
        record_latency(_COMPONENT, operation, (time.perf_counter() - started_at) * 1000)
        record_reconcile_outcome(
            action=result.action.value,
            status=result.status.value,
            fallback=result.fallback,
            reason=result.reason,
        )
        return result

    def _log_failure(self, operation: str, doc_id: str | None, exc: Exception) -> None:
        extra = {
            "component": _COMPONENT,
            "operation": operation,
            "doc_id": doc_id,
            "error_type": type(exc).__name__,
            "status_code": getattr(exc, "status_code", None),
            "correlation_id": get_correlation_id(),
        }
        if isinstance(exc, InfrastructureError):
            logger.error("calendar_sync_failed", extra=extra)
            return
        logger.exception("calendar_sync_unexpected_error", extra=extra)


def _failure_reason(exc: Exception) -> str:
    if isinstance(exc, CalendarTimeoutError):
        return "calendar_timeout"
    if isinstance(exc, CalendarServiceError):
        return "calendar_error"
    if isinstance(exc, InfrastructureError):
        return "mapping_store_unavailable"
    return "unexpected_error"
