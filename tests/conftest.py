"""Configuração do pytest para o serviço de sincronização QuoteIQ."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_calendar_settings,
    get_mapping_store_settings,
    get_sheets_settings,
)

_SETTINGS_GETTERS = (
    get_base_settings,
    get_calendar_settings,
    get_mapping_store_settings,
    get_sheets_settings,
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Cada teste lê env limpa; caches de settings são descartados."""
    for key in (
        "PORT",
        "LOG_LEVEL",
        "LOG_WEBHOOK_PAYLOADS",
        "GOOGLE_SERVICE_ACCOUNT_JSON",
        "GOOGLE_CALENDAR_ID",
        "CALENDAR_REQUEST_TIMEOUT_SECONDS",
        "GOOGLE_SHEETS_WEBHOOK_URL",
        "SHEETS_REQUEST_TIMEOUT_SECONDS",
        "MAPPING_STORE_BACKEND",
        "MAPPING_STORE_TTL_SECONDS",
        "REDIS_URL",
        "GCP_PROJECT",
        "GOOGLE_CLOUD_PROJECT",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("ENVIRONMENT", "test")
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
    yield
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
