"""Settings do encaminhamento de estimates para Google Sheets.

O endpoint é um web app (Apps Script) que recebe {type, payload} e faz
append na planilha. Sem URL o encaminhamento é desligado, sem erro.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SheetsSettings:
    """Configurações do encaminhamento para planilha.

    Attributes:
        webhook_url: URL do web app que recebe os eventos
        request_timeout_seconds: Timeout da requisição HTTP
    """

    webhook_url: str = ""
    request_timeout_seconds: float = 10.0

    @property
    def enabled(self) -> bool:
        """Retorna True se há URL configurada."""
        return bool(self.webhook_url)

    def validate(self) -> list[str]:
        """Valida configurações de encaminhamento.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.webhook_url and not self.webhook_url.startswith(("http://", "https://")):
            errors.append("GOOGLE_SHEETS_WEBHOOK_URL deve ser http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("SHEETS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SheetsSettings:
    """Carrega SheetsSettings a partir de variáveis de ambiente."""
    return SheetsSettings(
        webhook_url=os.getenv("GOOGLE_SHEETS_WEBHOOK_URL", "").strip(),
        request_timeout_seconds=float(os.getenv("SHEETS_REQUEST_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_sheets_settings() -> SheetsSettings:
    """Retorna instância cacheada de SheetsSettings."""
    return _load_from_env()
