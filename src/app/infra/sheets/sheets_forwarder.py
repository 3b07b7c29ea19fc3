"""Encaminhamento best-effort de eventos QuoteIQ para Google Sheets.

Uma unica tentativa, sem retry nem circuit breaker: a planilha e
append-only e tolera duplicatas de reentregas. Falhas viram log e
`False`, nunca excecao.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from app.observability import get_correlation_id, record_forward_outcome, record_latency
from app.protocols.sheets_forwarder import SheetsForwarderProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "sheets_forwarder"
# Corpo de erro truncado no log para nao vazar payload
_MAX_ERROR_BODY_CHARS = 200


class GoogleSheetsForwarder(SheetsForwarderProtocol):
    """Envia `{type, payload}` em JSON para o web app da planilha.

    Args:
        webhook_url: URL do endpoint; vazia desliga o encaminhamento
        timeout_seconds: Teto de tempo da requisicao
        transport: Transport httpx opcional (testes)
    """

    def __init__(
        self,
        webhook_url: str | None,
        *,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._webhook_url = webhook_url or ""
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self._webhook_url)

    async def forward(self, event_type: str, payload: dict[str, Any]) -> bool:
        if not self._webhook_url:
            logger.warning(
                "sheets_forward_skipped",
                extra={
                    "component": _COMPONENT,
                    "event_type": event_type,
                    "reason": "GOOGLE_SHEETS_WEBHOOK_URL not configured",
                },
            )
            return False

        started_at = time.perf_counter()
        delivered = await self._post(event_type, {"type": event_type, "payload": payload})
        record_latency(_COMPONENT, "forward", (time.perf_counter() - started_at) * 1000)
        record_forward_outcome(event_type, delivered)
        return delivered

    async def _post(self, event_type: str, body: dict[str, Any]) -> bool:
        try:
            # Apps Script responde 302 para o resultado da execucao
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout_seconds,
                follow_redirects=True,
            ) as client:
                response = await client.post(self._webhook_url, json=body)
        except httpx.HTTPError as exc:
            logger.error(
                "sheets_forward_transport_error",
                extra={
                    "component": _COMPONENT,
                    "event_type": event_type,
                    "error_type": type(exc).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )
            return False

        if response.is_success:
            logger.info(
                "sheets_forward_succeeded",
                extra={
                    "component": _COMPONENT,
                    "event_type": event_type,
                    "status_code": response.status_code,
                },
            )
            return True

        logger.error(
            "sheets_forward_failed",
            extra={
                "component": _COMPONENT,
                "event_type": event_type,
                "status_code": response.status_code,
                "reason_phrase": response.reason_phrase,
                "response_body": response.text[:_MAX_ERROR_BODY_CHARS],
            },
        )
        return False
