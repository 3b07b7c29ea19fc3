"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_webhook_dispatcher

    # Na inicialização do serviço
    initialize_app()

    # Dispatcher compartilhado entre requests
    dispatcher = get_webhook_dispatcher()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_calendar_settings,
    get_mapping_store_settings,
    get_sheets_settings,
)

if TYPE_CHECKING:
    from app.coordinators.quoteiq import WebhookDispatcher
    from app.protocols.mapping_store import AsyncMappingStoreProtocol

# Nome do serviço para logs e métricas
SERVICE_NAME = "quoteiq_sync"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação.

    Deve ser chamada uma vez no início do serviço. Configura logging
    estruturado JSON com correlation_id.
    """
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(
        f"mapping_store: {error}" for error in get_mapping_store_settings().validate(base)
    )
    errors.extend(f"calendar: {error}" for error in get_calendar_settings().validate_settings())
    errors.extend(f"sheets: {error}" for error in get_sheets_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_mapping_store() -> AsyncMappingStoreProtocol:
    """Obtém store de mapeamento (singleton)."""
    from app.bootstrap.dependencies import create_mapping_store

    return create_mapping_store()


@lru_cache(maxsize=1)
def get_webhook_dispatcher() -> WebhookDispatcher:
    """Obtém dispatcher de webhooks (singleton, mesmo store do readiness).

    Store que não pode ser construído desliga só a sincronização de
    calendário; estimates e eventos desconhecidos seguem sendo atendidos.
    """
    from app.bootstrap.dependencies import create_webhook_dispatcher

    try:
        mapping_store: AsyncMappingStoreProtocol | None = get_mapping_store()
    except Exception as exc:
        logger.error(
            "mapping_store_unavailable",
            extra={
                "component": "bootstrap",
                "result": "calendar_sync_disabled",
                "error_type": type(exc).__name__,
                "error": str(exc),
            },
        )
        mapping_store = None
    return create_webhook_dispatcher(mapping_store)
