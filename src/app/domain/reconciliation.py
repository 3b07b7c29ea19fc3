"""Resultado explicito das operacoes de reconciliacao de calendario.

Cada operacao devolve sucesso, skip (configuracao ausente, dados
insuficientes, nada a fazer) ou falha, para que chamadores e testes
decidam pelo resultado em vez de ler logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ReconcileStatus(StrEnum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


class ReconcileAction(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """Resultado de uma reconciliacao.

    Attributes:
        status: success | skipped | failed
        action: Acao efetivamente aplicada no calendario
        doc_id: Documento QuoteIQ reconciliado
        event_id: ID do evento no calendario (quando conhecido)
        reason: Motivo de skip/falha (sem PII)
        fallback: True quando um update virou create
    """

    status: ReconcileStatus
    action: ReconcileAction
    doc_id: str | None = None
    event_id: str | None = None
    reason: str | None = None
    fallback: bool = False

    @classmethod
    def success(
        cls,
        action: ReconcileAction,
        *,
        doc_id: str | None,
        event_id: str | None,
        fallback: bool = False,
    ) -> ReconcileResult:
        return cls(
            status=ReconcileStatus.SUCCESS,
            action=action,
            doc_id=doc_id,
            event_id=event_id,
            fallback=fallback,
        )

    @classmethod
    def skipped(cls, reason: str, *, doc_id: str | None = None) -> ReconcileResult:
        return cls(
            status=ReconcileStatus.SKIPPED,
            action=ReconcileAction.NONE,
            doc_id=doc_id,
            reason=reason,
        )

    @classmethod
    def failed(
        cls,
        action: ReconcileAction,
        reason: str,
        *,
        doc_id: str | None = None,
        event_id: str | None = None,
    ) -> ReconcileResult:
        return cls(
            status=ReconcileStatus.FAILED,
            action=action,
            doc_id=doc_id,
            event_id=event_id,
            reason=reason,
        )

    @property
    def ok(self) -> bool:
        return self.status is not ReconcileStatus.FAILED

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "action": self.action.value,
            "doc_id": self.doc_id,
            "event_id": self.event_id,
            "reason": self.reason,
            "fallback": self.fallback,
        }


__all__ = ["ReconcileAction", "ReconcileResult", "ReconcileStatus"]
