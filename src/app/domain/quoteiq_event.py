"""Modelos de dominio dos webhooks QuoteIQ.

O envelope guarda o payload bruto para encaminhar a planilha exatamente o
que o QuoteIQ enviou; `QuoteIQPayload` e a visao tolerante usada pelo
calendario, onde qualquer campo pode faltar ou vir com tipo inesperado.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TEXT_FIELDS = (
    "doc_id",
    "customer_name",
    "customer_phone",
    "customer_email",
    "customer_address",
    "services_list",
    "service_list",
    "schedule_notes",
    "estimate_no",
)


class EventType(StrEnum):
    """Conjunto fechado de eventos de ciclo de vida do QuoteIQ."""

    ESTIMATE_CREATED = "estimate.created"
    ESTIMATE_UPDATED = "estimate.updated"
    ESTIMATE_DELETED = "estimate.deleted"
    SCHEDULE_CREATED = "schedule.created"
    SCHEDULE_UPDATED = "schedule.updated"
    SCHEDULE_DELETED = "schedule.deleted"


def coerce_text(value: Any) -> str | None:
    """Converte valor escalar em texto; o resto vira ausente."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, int | float):
        return str(value)
    if isinstance(value, list | tuple):
        items = [text for item in value if (text := coerce_text(item))]
        return ", ".join(items) or None
    return None


class QuoteIQPayload(BaseModel):
    """Registro de estimate/schedule com todos os campos opcionais."""

    model_config = ConfigDict(extra="allow")

    doc_id: str | None = None
    customer_name: str | None = None
    customer_phone: str | None = None
    customer_email: str | None = None
    customer_address: str | None = None
    services_list: str | None = None
    service_list: str | None = None
    schedule_notes: str | None = None
    schedule_starts_at: str | int | float | None = None
    schedule_ends_at: str | int | float | None = None
    estimate_no: str | None = None
    total: str | int | float | None = None

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text_fields(cls, value: Any) -> str | None:
        return coerce_text(value)

    @field_validator("schedule_starts_at", "schedule_ends_at", "total", mode="before")
    @classmethod
    def _coerce_scalar_fields(cls, value: Any) -> str | int | float | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, str):
            return value.strip() or None
        if isinstance(value, int | float):
            return value
        return None

    @property
    def services(self) -> str | None:
        """Schedules usam `services_list`; alguns estimates usam `service_list`."""
        return self.services_list or self.service_list

    @classmethod
    def from_raw(cls, raw: dict[str, Any] | None) -> QuoteIQPayload:
        """Cria a visao tolerante a partir do payload bruto."""
        return cls.model_validate(raw or {})


class EventEnvelope(BaseModel):
    """Envelope `{type, payload}` recebido em POST /webhook/quoteiq."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(..., min_length=1, description="Tag do evento (ex: schedule.created).")
    payload: dict[str, Any] = Field(
        default_factory=dict,
        description="Registro bruto enviado pelo QuoteIQ.",
    )

    @field_validator("payload", mode="before")
    @classmethod
    def _default_payload(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def event_type(self) -> EventType | None:
        """Retorna o tipo conhecido ou None para tags fora do conjunto."""
        try:
            return EventType(self.type)
        except ValueError:
            return None

    def quoteiq_payload(self) -> QuoteIQPayload:
        return QuoteIQPayload.from_raw(self.payload)


__all__ = ["EventEnvelope", "EventType", "QuoteIQPayload", "coerce_text"]
