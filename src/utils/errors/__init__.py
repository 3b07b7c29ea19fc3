"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CalendarEventNotFoundError,
    CalendarServiceError,
    CalendarTimeoutError,
    FirestoreUnavailableError,
    InfrastructureError,
    RedisConnectionError,
)

__all__ = [
    "CalendarEventNotFoundError",
    "CalendarServiceError",
    "CalendarTimeoutError",
    "FirestoreUnavailableError",
    "InfrastructureError",
    "RedisConnectionError",
]
