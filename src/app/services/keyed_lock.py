"""Lock assíncrono por chave para serializar reconciliações do mesmo doc_id.

O QuoteIQ não garante ordem de entrega: sem exclusão mútua, um update que
cai no fallback de create e o create original podem rodar juntos e gerar
dois eventos para o mesmo documento.

Escopo: processo único. Com várias réplicas, o roteamento precisa manter
o mesmo doc_id na mesma instância.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class KeyedLock:
    """Mantém um `asyncio.Lock` por chave enquanto houver interessados."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    @asynccontextmanager
    async def acquire(self, key: str | None) -> AsyncIterator[None]:
        """Serializa o bloco por chave; chave vazia não serializa."""
        if not key:
            yield
            return

        lock = self._locks.setdefault(key, asyncio.Lock())
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                del self._locks[key]

    def is_locked(self, key: str) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)
