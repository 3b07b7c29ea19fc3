"""Endpoints de health check para Cloud Run."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings, get_calendar_settings, get_sheets_settings

if TYPE_CHECKING:
    from app.protocols.mapping_store import AsyncMappingStoreProtocol

router = APIRouter()

_STORE_PING_TIMEOUT_SECONDS = 2.0


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "disabled", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/")
async def root() -> dict[str, str]:
    """Sinal simples de vida usado pelo QuoteIQ ao cadastrar o webhook."""
    return {"status": "QuoteIQ webhook receiver is running"}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: store de mapeamento é crítico, integrações são flags."""
    store_check = await _check_mapping_store(getattr(request.app.state, "mapping_store", None))
    calendar_enabled = get_calendar_settings().enabled
    sheets_enabled = get_sheets_settings().enabled
    ready = store_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "mapping_store": store_check.as_dict(),
            "calendar": DependencyCheck(status="ok" if calendar_enabled else "disabled").as_dict(),
            "sheets": DependencyCheck(status="ok" if sheets_enabled else "disabled").as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_mapping_store(store: AsyncMappingStoreProtocol | None) -> DependencyCheck:
    if store is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        healthy = await asyncio.wait_for(store.ping(), timeout=_STORE_PING_TIMEOUT_SECONDS)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        return DependencyCheck(status="failed", error=type(exc).__name__)
    if not healthy:
        return DependencyCheck(status="failed", error="ping_failed")
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))
