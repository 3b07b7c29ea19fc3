"""Contrato de calendario usado pela sincronizacao de agendamentos.

Mantemos apenas o protocolo aqui para permitir troca de provider sem
impactar o engine de reconciliacao.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.calendar_resource import CalendarResource


@runtime_checkable
class CalendarServiceProtocol(Protocol):
    """Contrato para criar, atualizar e remover eventos de calendario.

    Falhas sao sinalizadas por excecoes de `utils.errors`:
    - CalendarEventNotFoundError: evento nao existe mais no provider
    - CalendarTimeoutError: chamada excedeu o teto de tempo
    - CalendarServiceError: qualquer outra falha remota
    """

    async def insert_event(self, resource: CalendarResource) -> str:
        """Cria evento e retorna o ID gerado pelo provider."""
        ...

    async def update_event(self, event_id: str, resource: CalendarResource) -> str:
        """Substitui o conteudo do evento e retorna seu ID."""
        ...

    async def delete_event(self, event_id: str) -> None:
        """Remove o evento do calendario."""
        ...
