"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas depois
(Cloud Logging / BigQuery) por `metric_type`.

Métricas suportadas:
- Latência: tempo de cada operação externa (calendário, planilha)
- Reconciliação: counter de resultados por ação/status
- Encaminhamento: counter de sucesso/falha do envio para planilha

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("calendar_sync", "update", (time.perf_counter() - start) * 1000)
    record_reconcile_outcome(action="update", status="success", fallback=False)
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "calendar_sync", "sheets_forwarder")
        operation: Nome da operação (ex: "create", "forward")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (usa o do contexto se None)
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )


def record_reconcile_outcome(
    *,
    action: str,
    status: str,
    fallback: bool = False,
    reason: str | None = None,
) -> None:
    """Registra resultado de uma reconciliação de calendário."""
    logger.info(
        "metric_reconcile_outcome",
        extra={
            "metric_type": "reconcile_outcome",
            "action": action,
            "status": status,
            "fallback": fallback,
            "reason": reason,
            "correlation_id": get_correlation_id(),
        },
    )


def record_forward_outcome(event_type: str, delivered: bool) -> None:
    """Registra resultado do encaminhamento para planilha."""
    logger.info(
        "metric_forward_outcome",
        extra={
            "metric_type": "forward_outcome",
            "event_type": event_type,
            "delivered": delivered,
            "correlation_id": get_correlation_id(),
        },
    )
