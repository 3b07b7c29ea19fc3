"""Testes das settings carregadas de variáveis de ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    MappingStoreSettings,
    get_base_settings,
    get_calendar_settings,
    get_mapping_store_settings,
    get_sheets_settings,
)
from config.settings.sheets import SheetsSettings


class TestBaseSettings:
    def test_defaults(self) -> None:
        settings = get_base_settings()

        assert settings.environment == "test"
        assert settings.port == 3000
        assert settings.log_webhook_payloads is False
        assert settings.is_development is True
        assert settings.is_strict is False

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LOG_WEBHOOK_PAYLOADS", "true")

        settings = get_base_settings()

        assert settings.environment == "production"
        assert settings.is_strict is True
        assert settings.port == 8080
        assert settings.log_webhook_payloads is True

    def test_invalid_port_falls_back_to_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "abc")

        assert get_base_settings().port == 3000

    def test_validate_port_range(self) -> None:
        assert BaseSettings(port=70000).validate() == ["PORT inválida: 70000"]


class TestMappingStoreSettings:
    def test_memory_is_default_outside_strict_envs(self) -> None:
        assert get_mapping_store_settings().backend == "memory"

    def test_redis_is_default_in_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")

        assert get_mapping_store_settings().backend == "redis"

    @pytest.mark.parametrize("alias", ["stage", "prod", "STAGING"])
    def test_redis_is_default_for_environment_aliases(
        self, monkeypatch: pytest.MonkeyPatch, alias: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", alias)

        assert get_mapping_store_settings().backend == "redis"
        assert get_mapping_store_settings().validate(get_base_settings()) == [
            "MAPPING_STORE_BACKEND=redis requer REDIS_URL configurado"
        ]

    def test_memory_rejected_in_production(self) -> None:
        errors = MappingStoreSettings(backend="memory").validate(
            BaseSettings(environment="production")
        )

        assert any("memory" in error for error in errors)

    def test_backend_requirements(self) -> None:
        base = BaseSettings(environment="staging")

        assert MappingStoreSettings(backend="redis").validate(base) == [
            "MAPPING_STORE_BACKEND=redis requer REDIS_URL configurado"
        ]
        assert MappingStoreSettings(backend="firestore").validate(base) == [
            "MAPPING_STORE_BACKEND=firestore requer GCP_PROJECT configurado"
        ]
        assert MappingStoreSettings(backend="redis", redis_url="redis://x").validate(base) == []

    def test_ttl_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAPPING_STORE_TTL_SECONDS", "604800")

        assert get_mapping_store_settings().ttl_seconds == 604800


class TestCalendarSettings:
    def test_disabled_without_credentials(self) -> None:
        settings = get_calendar_settings()

        assert settings.enabled is False
        assert settings.google_calendar_id == "primary"
        assert settings.request_timeout_seconds == 10.0

    def test_enabled_with_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", '{"type": "service_account"}')
        monkeypatch.setenv("GOOGLE_CALENDAR_ID", "team@example.com")

        settings = get_calendar_settings()

        assert settings.enabled is True
        assert settings.google_calendar_id == "team@example.com"
        assert settings.validate_settings() == []


class TestSheetsSettings:
    def test_disabled_without_url(self) -> None:
        assert get_sheets_settings().enabled is False

    def test_url_must_be_http(self) -> None:
        assert SheetsSettings(webhook_url="ftp://x").validate() == [
            "GOOGLE_SHEETS_WEBHOOK_URL deve ser http(s)"
        ]

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_SHEETS_WEBHOOK_URL", " https://script.google.com/x ")
        monkeypatch.setenv("SHEETS_REQUEST_TIMEOUT_SECONDS", "3")

        settings = get_sheets_settings()

        assert settings.enabled is True
        assert settings.webhook_url == "https://script.google.com/x"
        assert settings.request_timeout_seconds == 3.0
