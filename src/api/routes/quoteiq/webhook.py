"""Endpoint de webhook do QuoteIQ.

Endpoints:
- POST /webhook/quoteiq: recebimento de eventos de estimate/schedule

Fluxo:
1. Parse do envelope `{type, payload}`
2. Dispatch inline (calendário ou planilha)
3. 200 com o desfecho; 500 para corpo malformado ou falha inesperada

O processamento é inline e todo envelope válido recebe 200, mesmo quando
o calendário ou a planilha falham: o desfecho vai em `outcome` e nos logs,
e o QuoteIQ não reentrega o evento.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.quoteiq.webhook import WebhookRequestError, parse_webhook_request
from app.observability import correlation_scope
from config.logging import redact_payload
from config.settings import get_base_settings

if TYPE_CHECKING:
    from app.coordinators.quoteiq import WebhookDispatcher

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_dispatcher() -> WebhookDispatcher:
    """Obtém o dispatcher (lazy-loading via composition root)."""
    from app.bootstrap import get_webhook_dispatcher

    return get_webhook_dispatcher()


def _error_response(error: str) -> JSONResponse:
    return JSONResponse(
        content={"success": False, "error": error},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


@router.post("/quoteiq", response_model=None)
async def receive_webhook(request: Request) -> JSONResponse:
    """Recebimento de eventos do QuoteIQ.

    Returns:
        200 com `event_type`/`outcome` ou 500 com `error`.
    """
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        raw_body = await request.body()

        try:
            envelope = parse_webhook_request(raw_body)
        except WebhookRequestError as exc:
            logger.warning(
                "webhook_envelope_invalid",
                extra={
                    "channel": "quoteiq",
                    "correlation_id": correlation_id,
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            return _error_response("Invalid webhook payload")

        log_extra: dict[str, Any] = {
            "channel": "quoteiq",
            "correlation_id": correlation_id,
            "event_type": envelope.type,
            "payload_size": len(raw_body),
        }
        if get_base_settings().log_webhook_payloads:
            log_extra["payload"] = redact_payload(envelope.payload)
        logger.info("webhook_received", extra=log_extra)

        try:
            result = await _get_dispatcher().dispatch(envelope)
        except Exception:
            logger.exception(
                "webhook_processing_failed",
                extra={
                    "channel": "quoteiq",
                    "correlation_id": correlation_id,
                    "event_type": envelope.type,
                },
            )
            return _error_response("Internal server error")

        logger.info(
            "webhook_processed",
            extra={
                "channel": "quoteiq",
                "correlation_id": correlation_id,
                "event_type": result.event_type,
                "outcome": result.outcome,
            },
        )
        return JSONResponse(
            content={
                "success": True,
                "message": "Event processed successfully",
                "event_type": result.event_type,
                "outcome": result.outcome,
                "correlation_id": correlation_id,
            },
            status_code=status.HTTP_200_OK,
        )
