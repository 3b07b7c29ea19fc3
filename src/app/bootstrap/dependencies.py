"""Factories de dependências: conecta implementações concretas aos protocolos.

Cada factory lê apenas as settings do próprio componente; o wiring final
fica em `create_webhook_dispatcher`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_async_redis_client, create_firestore_client
from app.coordinators.quoteiq import WebhookDispatcher
from app.infra.calendar.google_calendar_client import create_google_calendar_client
from app.infra.sheets import GoogleSheetsForwarder
from app.infra.stores import FirestoreMappingStore, MemoryMappingStore, RedisMappingStore
from app.services import CalendarSyncEngine
from config.settings import (
    get_base_settings,
    get_calendar_settings,
    get_mapping_store_settings,
    get_sheets_settings,
)

if TYPE_CHECKING:
    from app.protocols.calendar_service import CalendarServiceProtocol
    from app.protocols.mapping_store import AsyncMappingStoreProtocol
    from app.protocols.sheets_forwarder import SheetsForwarderProtocol

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Mapping Store Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_mapping_store() -> AsyncMappingStoreProtocol:
    """Cria store de mapeamento baseado na configuração.

    Lê MAPPING_STORE_BACKEND:
    - "memory": MemoryMappingStore (dev/test)
    - "redis": RedisMappingStore (staging/production)
    - "firestore": FirestoreMappingStore

    Raises:
        ValueError: Backend inválido ou sem conexão configurada
    """
    settings = get_mapping_store_settings()
    backend = settings.backend

    if backend == "redis":
        store: AsyncMappingStoreProtocol = RedisMappingStore(
            create_async_redis_client(settings.redis_url),
            ttl_seconds=settings.ttl_seconds,
        )
    elif backend == "firestore":
        store = FirestoreMappingStore(
            create_firestore_client(settings.gcp_project),
            collection=settings.firestore_collection,
        )
    elif backend == "memory":
        environment = get_base_settings().environment
        if environment not in ("development", "test"):
            logger.warning(
                "memory_mapping_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        store = MemoryMappingStore()
    else:
        msg = f"MAPPING_STORE_BACKEND inválido: {backend}"
        raise ValueError(msg)

    logger.info("mapping_store_created", extra={"backend": backend})
    return store


# ──────────────────────────────────────────────────────────────────────────────
# Integrações externas
# ──────────────────────────────────────────────────────────────────────────────


def create_calendar_service() -> CalendarServiceProtocol | None:
    """Cria client do calendário; None quando não configurado."""
    settings = get_calendar_settings()
    return create_google_calendar_client(
        calendar_id=settings.google_calendar_id,
        credentials_json=settings.google_service_account_json,
        timeout_seconds=settings.request_timeout_seconds,
    )


def create_sheets_forwarder() -> SheetsForwarderProtocol:
    """Cria forwarder da planilha (desligado quando sem URL)."""
    settings = get_sheets_settings()
    if not settings.enabled:
        logger.warning(
            "sheets_forwarder_not_configured",
            extra={"component": "sheets_forwarder", "reason": "missing_webhook_url"},
        )
    return GoogleSheetsForwarder(
        settings.webhook_url,
        timeout_seconds=settings.request_timeout_seconds,
    )


# ──────────────────────────────────────────────────────────────────────────────
# Serviços e coordenação
# ──────────────────────────────────────────────────────────────────────────────


def create_calendar_sync_engine(
    mapping_store: AsyncMappingStoreProtocol | None,
) -> CalendarSyncEngine:
    return CalendarSyncEngine(
        calendar=create_calendar_service(),
        mapping_store=mapping_store,
    )


def create_webhook_dispatcher(
    mapping_store: AsyncMappingStoreProtocol | None,
) -> WebhookDispatcher:
    """Monta o dispatcher com engine de calendário e forwarder."""
    return WebhookDispatcher(
        calendar_sync=create_calendar_sync_engine(mapping_store),
        sheets_forwarder=create_sheets_forwarder(),
    )
