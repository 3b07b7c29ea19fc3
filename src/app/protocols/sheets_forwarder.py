"""Contrato do encaminhamento best-effort de eventos para planilha."""

from __future__ import annotations

from typing import Any, Protocol


class SheetsForwarderProtocol(Protocol):
    """Envia `{type, payload}` para o endpoint de ingestão.

    Nunca levanta exceção: retorna True se o endpoint respondeu 2xx.
    """

    @property
    def enabled(self) -> bool: ...

    async def forward(self, event_type: str, payload: dict[str, Any]) -> bool: ...
