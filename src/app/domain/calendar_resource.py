"""Representacao do evento de calendario derivada de um schedule QuoteIQ.

A construcao e deterministica: o mesmo payload sempre gera o mesmo corpo,
tanto no create quanto no update.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from app.domain.quoteiq_event import QuoteIQPayload

DEFAULT_CUSTOMER_NAME = "QuoteIQ Customer"
MISSING = "N/A"
NO_NOTES = "None"


class CalendarResource(BaseModel):
    """Evento a ser gravado no calendario (transiente, por requisicao)."""

    model_config = ConfigDict(frozen=True)

    summary: str = Field(..., description="Titulo do evento.")
    description: str = Field(..., description="Bloco com dados do cliente e doc_id.")
    start: datetime = Field(..., description="Inicio em UTC.")
    end: datetime = Field(..., description="Fim em UTC.")
    location: str = Field(default="", description="Endereco do cliente.")
    attendees: tuple[str, ...] = Field(default=(), description="Emails convidados.")

    def to_google_body(self) -> dict[str, Any]:
        """Serializa no formato `events` da Google Calendar API v3."""
        body: dict[str, Any] = {
            "summary": self.summary,
            "description": self.description,
            "start": {"dateTime": format_instant(self.start), "timeZone": "UTC"},
            "end": {"dateTime": format_instant(self.end), "timeZone": "UTC"},
            "location": self.location,
        }
        if self.attendees:
            body["attendees"] = [{"email": email} for email in self.attendees]
        return body


def parse_instant(value: Any) -> datetime | None:
    """Normaliza timestamp do QuoteIQ para instante UTC.

    Aceita ISO-8601 (com `Z`, offset ou sem fuso, lido como UTC) e numeros
    em epoch milissegundos. Valor ausente ou invalido retorna None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def format_instant(value: datetime) -> str:
    """ISO-8601 em UTC com milissegundos e sufixo Z."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_description(payload: QuoteIQPayload) -> str:
    lines = (
        f"Customer: {payload.customer_name or MISSING}",
        f"Phone: {payload.customer_phone or MISSING}",
        f"Email: {payload.customer_email or MISSING}",
        f"Address: {payload.customer_address or MISSING}",
        f"Services: {payload.services or MISSING}",
        f"Notes: {payload.schedule_notes or NO_NOTES}",
        f"QuoteIQ Doc ID: {payload.doc_id or MISSING}",
    )
    return "\n".join(lines)


def build_calendar_resource(payload: QuoteIQPayload) -> CalendarResource | None:
    """Monta o evento a partir do payload.

    Retorna None quando inicio ou fim faltam (ou fim < inicio): nesse caso
    o calendario nao deve ser chamado.
    """
    start = parse_instant(payload.schedule_starts_at)
    end = parse_instant(payload.schedule_ends_at)
    if start is None or end is None or end < start:
        return None
    attendees = (payload.customer_email,) if payload.customer_email else ()
    return CalendarResource(
        summary=f"Appointment - {payload.customer_name or DEFAULT_CUSTOMER_NAME}",
        description=build_description(payload),
        start=start,
        end=end,
        location=payload.customer_address or "",
        attendees=attendees,
    )


def time_bounds_issue(payload: QuoteIQPayload) -> str:
    """Motivo do skip quando `build_calendar_resource` retorna None."""
    start = parse_instant(payload.schedule_starts_at)
    end = parse_instant(payload.schedule_ends_at)
    if start is None or end is None:
        return "missing_time_bounds"
    return "invalid_time_bounds"


__all__ = [
    "CalendarResource",
    "build_calendar_resource",
    "build_description",
    "format_instant",
    "parse_instant",
    "time_bounds_issue",
]
