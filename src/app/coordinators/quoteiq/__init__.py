"""Coordenação de webhooks QuoteIQ."""

from app.coordinators.quoteiq.dispatcher import DispatchResult, WebhookDispatcher

__all__ = ["DispatchResult", "WebhookDispatcher"]
