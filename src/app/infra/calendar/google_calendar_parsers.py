"""Helpers internos de parsing para respostas da Google Calendar API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from googleapiclient.errors import HttpError

# Status que indicam evento removido no provider
NOT_FOUND_STATUSES = frozenset({404, 410})


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None


def is_not_found(exc: HttpError) -> bool:
    return http_status(exc) in NOT_FOUND_STATUSES


def extract_event_id(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    event_id = payload.get("id")
    return str(event_id) if event_id else None
