"""Protocolos e contratos do core da aplicação."""

from .calendar_service import CalendarServiceProtocol
from .mapping_store import AsyncMappingStoreProtocol
from .sheets_forwarder import SheetsForwarderProtocol

__all__ = [
    "AsyncMappingStoreProtocol",
    "CalendarServiceProtocol",
    "SheetsForwarderProtocol",
]
