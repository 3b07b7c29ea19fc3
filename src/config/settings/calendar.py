"""Settings de integracao com Google Calendar.

Centralizar a leitura de env aqui evita espalhar parse de configuracao
pela aplicacao e reduz risco de divergencia entre servicos.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CALENDAR_ID = "primary"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0


class CalendarSettings(BaseModel):
    """Configuracoes do calendario sincronizado com os agendamentos QuoteIQ."""

    model_config = ConfigDict(extra="ignore")

    google_calendar_id: str = Field(
        default=DEFAULT_CALENDAR_ID,
        description="ID do calendario alvo no Google Calendar.",
    )
    google_service_account_json: str | None = Field(
        default=None,
        description="Credencial JSON da service account em formato texto.",
    )
    request_timeout_seconds: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT_SECONDS,
        gt=0,
        description="Teto de tempo de cada chamada a API do calendario.",
    )

    @property
    def enabled(self) -> bool:
        """Sem credencial a integracao fica desligada (skip + log)."""
        return bool(self.google_service_account_json)

    def validate_settings(self) -> list[str]:
        """Valida configuracoes; credencial ausente nao e erro."""
        errors: list[str] = []
        if not self.google_calendar_id:
            errors.append("GOOGLE_CALENDAR_ID nao pode ser vazio")
        return errors


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variaveis de ambiente."""
    return CalendarSettings(
        google_calendar_id=_read_optional_env("GOOGLE_CALENDAR_ID") or DEFAULT_CALENDAR_ID,
        google_service_account_json=_read_optional_env("GOOGLE_SERVICE_ACCOUNT_JSON"),
        request_timeout_seconds=float(
            os.getenv("CALENDAR_REQUEST_TIMEOUT_SECONDS", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
        ),
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instancia cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = ["CalendarSettings", "get_calendar_settings"]
