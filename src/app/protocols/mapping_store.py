"""Protocolo do store de mapeamento doc_id -> evento do calendário.

Interface leve (ABC) dependida pelo engine de sincronização.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AsyncMappingStoreProtocol(ABC):
    """Contrato assíncrono do mapeamento de identidade.

    Invariantes:
    - No máximo um mapeamento vivo por doc_id.
    - Ausência de mapeamento não é erro: é o sinal para criar o evento.
    """

    @abstractmethod
    async def get(self, doc_id: str) -> str | None:
        """Retorna o event_id mapeado ou None se não houver."""

    @abstractmethod
    async def put(self, doc_id: str, event_id: str) -> None:
        """Grava o mapeamento doc_id -> event_id."""

    @abstractmethod
    async def remove(self, doc_id: str) -> bool:
        """Remove o mapeamento.

        Returns:
            True se havia mapeamento; False caso contrário.
        """

    @abstractmethod
    async def ping(self) -> bool:
        """Verifica se o backend está acessível (readiness)."""

    async def close(self) -> None:
        """Libera conexões do backend (no-op por padrão)."""
        return None
