"""Agregador de settings do serviço de sincronização QuoteIQ.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    MappingStoreBackend,
    MappingStoreSettings,
    get_base_settings,
    get_mapping_store_settings,
)

# Calendar settings
from config.settings.calendar import (
    CalendarSettings,
    get_calendar_settings,
)

# Spreadsheet settings
from config.settings.sheets import (
    SheetsSettings,
    get_sheets_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    # Calendar
    "CalendarSettings",
    "Environment",
    # Mapping store
    "MappingStoreBackend",
    "MappingStoreSettings",
    # Sheets
    "SheetsSettings",
    "get_base_settings",
    "get_calendar_settings",
    "get_mapping_store_settings",
    "get_sheets_settings",
]
