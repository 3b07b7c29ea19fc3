"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""


class FirestoreUnavailableError(InfrastructureError):
    """Falha de indisponibilidade ao acessar Firestore."""


class CalendarServiceError(InfrastructureError):
    """Falha ao executar operação na API de calendário.

    Attributes:
        status_code: Status HTTP retornado pelo provider (quando houver).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CalendarEventNotFoundError(CalendarServiceError):
    """Evento não existe mais no calendário (404/410)."""


class CalendarTimeoutError(CalendarServiceError):
    """Chamada ao calendário excedeu o teto de tempo configurado."""
