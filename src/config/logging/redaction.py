"""Mascaramento de PII em payloads de webhook antes de logar.

Payloads QuoteIQ carregam nome, telefone, email e endereço do cliente.
Só IDs opacos e campos operacionais podem sair em claro.
"""

from __future__ import annotations

from typing import Any

PII_FIELDS = frozenset(
    {
        "customer_name",
        "customer_phone",
        "customer_email",
        "customer_address",
        "schedule_notes",
    }
)

MASK = "***"


def mask_value(value: Any) -> str:
    """Mantém só as duas últimas posições de valores textuais."""
    text = str(value)
    if len(text) <= 4:
        return MASK
    return f"{MASK}{text[-2:]}"


def redact_payload(payload: Any) -> Any:
    """Retorna cópia do payload com campos de PII mascarados.

    Percorre dicts e listas aninhados; o payload original não é alterado.
    """
    if isinstance(payload, dict):
        return {
            key: (
                mask_value(value)
                if key in PII_FIELDS and value not in (None, "")
                else redact_payload(value)
            )
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    return payload
