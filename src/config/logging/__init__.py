"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="quoteiq_sync")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("calendar_event_created", extra={"doc_id": "Q1"})

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime. Logs nunca carregam PII em claro (ver redaction).
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)
from config.logging.redaction import PII_FIELDS, redact_payload

__all__ = [
    "FIELD_RENAME_MAP",
    "PII_FIELDS",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_fallback",
    "redact_payload",
]
