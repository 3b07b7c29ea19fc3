"""Settings base do serviço de sincronização QuoteIQ.

Configurações comuns a todos os componentes (servidor, logging, ambiente).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "test", "staging", "production"]

DEFAULT_PORT = 3000


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|test|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        port: Porta HTTP do servidor
        log_level: Nível de log do root logger
        log_webhook_payloads: Loga payload recebido (com PII mascarada)
    """

    environment: Environment = "development"
    service_name: str = "quoteiq-sync"
    debug: bool = False
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    log_webhook_payloads: bool = False

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento ou teste."""
        return self.environment in ("development", "test")

    @property
    def is_strict(self) -> bool:
        """Ambientes em que configuração inválida impede o boot."""
        return self.environment in ("staging", "production")

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not 0 < self.port < 65536:
            errors.append(f"PORT inválida: {self.port}")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.strip().lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    if env_lower == "test":
        return "test"
    return "development"


def _parse_port(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return DEFAULT_PORT


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "quoteiq-sync"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        port=_parse_port(os.getenv("PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_webhook_payloads=os.getenv("LOG_WEBHOOK_PAYLOADS", "").lower()
        in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
