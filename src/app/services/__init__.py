"""Serviços de aplicação.

Unidades de orquestração que dependem apenas de protocolos.
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.calendar_sync import CalendarSyncEngine
from app.services.keyed_lock import KeyedLock

__all__ = [
    "CalendarSyncEngine",
    "KeyedLock",
]
