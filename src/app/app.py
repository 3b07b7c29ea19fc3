"""Entrypoint do serviço de sincronização QuoteIQ.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    quoteiq-sync
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import (
    get_mapping_store,
    get_webhook_dispatcher,
    initialize_app,
    validate_runtime_settings,
)
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

# Tempo para requests em andamento terminarem no shutdown
GRACEFUL_SHUTDOWN_SECONDS = 30


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Instancia store de mapeamento e dispatcher

    Shutdown:
    - Fecha conexões do store de mapeamento
    """
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings()

    get_webhook_dispatcher()
    app.state.mapping_store = None
    try:
        app.state.mapping_store = get_mapping_store()
    except Exception as exc:
        # Sem store o /ready responde 503 e schedules são ignorados
        logger.warning("mapping_store_not_ready", extra={"error_type": type(exc).__name__})

    yield

    logger.info("app_shutting_down", extra={"service": service_name})
    if app.state.mapping_store is not None:
        await app.state.mapping_store.close()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="QuoteIQ Sync",
        description="Reconciliação de webhooks QuoteIQ com calendário e planilha",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_base_settings()
    logger.info("Starting QuoteIQ Sync", extra={"port": settings.port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        timeout_graceful_shutdown=GRACEFUL_SHUTDOWN_SECONDS,
    )


if __name__ == "__main__":
    main()
