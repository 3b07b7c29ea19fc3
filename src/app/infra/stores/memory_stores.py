"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios:
um restart perde os mapeamentos e o próximo update cria evento duplicado.
"""

from __future__ import annotations

from app.protocols.mapping_store import AsyncMappingStoreProtocol


class MemoryMappingStore(AsyncMappingStoreProtocol):
    """Mapeamento doc_id -> event_id em memória, apenas para dev/test."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    async def get(self, doc_id: str) -> str | None:
        """Retorna event_id mapeado."""
        return self._store.get(doc_id)

    async def put(self, doc_id: str, event_id: str) -> None:
        """Grava mapeamento."""
        self._store[doc_id] = event_id

    async def remove(self, doc_id: str) -> bool:
        """Remove mapeamento."""
        return self._store.pop(doc_id, None) is not None

    async def ping(self) -> bool:
        return True

    def snapshot(self) -> dict[str, str]:
        """Retorna cópia do estado (apenas para testes)."""
        return dict(self._store)
