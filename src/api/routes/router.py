"""Agregador de rotas: registra health checks e o webhook QuoteIQ.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.quoteiq.router import router as quoteiq_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks na raiz (/, /health, /ready)
    api_router.include_router(health_router, tags=["health"])

    # POST /webhook/quoteiq
    api_router.include_router(
        quoteiq_router,
        prefix="/webhook",
        tags=["quoteiq"],
    )

    return api_router
