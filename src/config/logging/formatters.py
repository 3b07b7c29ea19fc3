"""Formatters de logging estruturado.

Todo log sai em JSON com os campos obrigatórios abaixo, renomeados para
o formato consumido pelo Cloud Logging.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02T10:30:00",
            "level": "INFO",
            "logger": "app.services.calendar_sync",
            "message": "calendar_event_created",
            "correlation_id": "abc-123",
            "service": "quoteiq_sync"
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
