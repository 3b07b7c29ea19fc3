"""Stores: implementações concretas do mapeamento doc_id -> event_id.

Módulos disponíveis:
    - memory_stores: Store em memória para desenvolvimento/testes
    - redis_mapping_store: Store usando Redis (Upstash)
    - firestore_mapping_store: Store usando Firestore
"""

from __future__ import annotations

from app.infra.stores.firestore_mapping_store import FirestoreMappingStore
from app.infra.stores.memory_stores import MemoryMappingStore
from app.infra.stores.redis_mapping_store import RedisMappingStore

__all__ = [
    # Firestore
    "FirestoreMappingStore",
    # Memory (dev/test)
    "MemoryMappingStore",
    # Redis (Upstash)
    "RedisMappingStore",
]
