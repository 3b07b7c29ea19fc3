"""Firestore Mapping Store: mapeamento doc_id -> event_id durável."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.protocols.mapping_store import AsyncMappingStoreProtocol
from config.settings.base.mapping_store import DEFAULT_FIRESTORE_COLLECTION
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

HEALTH_COLLECTION = "_health"


class FirestoreMappingStore(AsyncMappingStoreProtocol):
    """Store de mapeamento usando Firestore (um documento por doc_id)."""

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection: str = DEFAULT_FIRESTORE_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection

    async def get(self, doc_id: str) -> str | None:
        return await asyncio.to_thread(self._get_sync, doc_id)

    async def put(self, doc_id: str, event_id: str) -> None:
        await asyncio.to_thread(self._put_sync, doc_id, event_id)

    async def remove(self, doc_id: str) -> bool:
        return await asyncio.to_thread(self._remove_sync, doc_id)

    async def ping(self) -> bool:
        try:
            await asyncio.to_thread(self._ping_sync)
        except Exception as exc:
            logger.warning(
                "firestore_mapping_store_ping_failed",
                extra={"error_type": type(exc).__name__},
            )
            return False
        return True

    def _get_sync(self, doc_id: str) -> str | None:
        try:
            doc = self._db.collection(self._collection).document(doc_id).get()
        except Exception as exc:
            raise FirestoreUnavailableError("Falha ao ler mapeamento no Firestore") from exc
        if not doc.exists:
            return None
        data = doc.to_dict() or {}
        event_id = data.get("event_id")
        return str(event_id) if event_id else None

    def _put_sync(self, doc_id: str, event_id: str) -> None:
        try:
            self._db.collection(self._collection).document(doc_id).set(
                {"event_id": event_id, "updated_at": datetime.now(UTC).isoformat()}
            )
        except Exception as exc:
            raise FirestoreUnavailableError("Falha ao gravar mapeamento no Firestore") from exc
        logger.debug("calendar_mapping_stored", extra={"doc_id": doc_id, "backend": "firestore"})

    def _remove_sync(self, doc_id: str) -> bool:
        try:
            ref = self._db.collection(self._collection).document(doc_id)
            existed = bool(ref.get().exists)
            ref.delete()
        except Exception as exc:
            raise FirestoreUnavailableError("Falha ao remover mapeamento no Firestore") from exc
        return existed

    def _ping_sync(self) -> None:
        self._db.collection(HEALTH_COLLECTION).document("check").get()
