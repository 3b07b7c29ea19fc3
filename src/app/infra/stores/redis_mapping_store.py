"""Redis Mapping Store: mapeamento doc_id -> event_id durável.

Contrato de Keys:
    As keys são doc_ids do QuoteIQ (IDs opacos). Nunca usar dados do
    cliente (telefone, email) como key.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.mapping_store import AsyncMappingStoreProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

# Prefixo para namespace dos mapeamentos
MAPPING_PREFIX = "calendar_mapping:"


class RedisMappingStore(AsyncMappingStoreProtocol):
    """Store de mapeamento usando Redis (Upstash compatível).

    Args:
        async_redis_client: Cliente Redis assíncrono
        ttl_seconds: Expiração opcional das chaves (None = sem expiração)
    """

    def __init__(
        self,
        async_redis_client: AsyncRedis[bytes],
        ttl_seconds: int | None = None,
    ) -> None:
        self._redis = async_redis_client
        self._ttl_seconds = ttl_seconds

    def _key(self, doc_id: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{MAPPING_PREFIX}{doc_id}"

    async def get(self, doc_id: str) -> str | None:
        try:
            raw = await self._redis.get(self._key(doc_id))
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler mapeamento no Redis") from exc
        if raw is None:
            return None
        return raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)

    async def put(self, doc_id: str, event_id: str) -> None:
        try:
            await self._redis.set(self._key(doc_id), event_id, ex=self._ttl_seconds)
        except Exception as exc:
            raise RedisConnectionError("Falha ao gravar mapeamento no Redis") from exc
        logger.debug("calendar_mapping_stored", extra={"doc_id": doc_id, "backend": "redis"})

    async def remove(self, doc_id: str) -> bool:
        try:
            removed = await self._redis.delete(self._key(doc_id))
        except Exception as exc:
            raise RedisConnectionError("Falha ao remover mapeamento no Redis") from exc
        return bool(removed)

    async def ping(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except Exception:
            logger.warning("redis_mapping_store_ping_failed")
            return False

    async def close(self) -> None:
        await self._redis.aclose()
