"""Parse e validação inicial do webhook QuoteIQ (sem PII)."""

from __future__ import annotations

import json

from pydantic import ValidationError

from app.domain.quoteiq_event import EventEnvelope


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """Corpo do webhook não é JSON válido."""


class InvalidEnvelopeError(WebhookRequestError):
    """JSON válido, mas fora do formato `{type, payload}`."""


def parse_webhook_request(raw_body: bytes) -> EventEnvelope:
    """Parseia o corpo bruto em `EventEnvelope`.

    Raises:
        InvalidJsonError: Se o corpo não for JSON
        InvalidEnvelopeError: Se faltar `type` string ou `payload` não for objeto
    """
    try:
        data = json.loads(raw_body)
    except ValueError as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(data, dict):
        raise InvalidEnvelopeError("payload_not_object")

    event_type = data.get("type")
    if not isinstance(event_type, str) or not event_type.strip():
        raise InvalidEnvelopeError("missing_type")

    payload = data.get("payload")
    if payload is not None and not isinstance(payload, dict):
        raise InvalidEnvelopeError("payload_not_object")

    try:
        return EventEnvelope.model_validate(data)
    except ValidationError as exc:
        raise InvalidEnvelopeError("invalid_envelope") from exc
