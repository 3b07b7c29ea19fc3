"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.mapping_store import (
    MappingStoreBackend,
    MappingStoreSettings,
    get_mapping_store_settings,
)

__all__ = [
    # Core
    "BaseSettings",
    # Types
    "Environment",
    # Mapping store
    "MappingStoreBackend",
    "MappingStoreSettings",
    "get_base_settings",
    "get_mapping_store_settings",
]
