"""Webhook QuoteIQ: parsing seguro do envelope."""

from .receive import (
    InvalidEnvelopeError,
    InvalidJsonError,
    WebhookRequestError,
    parse_webhook_request,
)

__all__ = [
    "InvalidEnvelopeError",
    "InvalidJsonError",
    "WebhookRequestError",
    "parse_webhook_request",
]
