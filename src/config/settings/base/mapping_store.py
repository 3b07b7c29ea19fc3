"""Settings do store de mapeamento doc_id -> evento do calendário.

A durabilidade do mapeamento é escolha de configuração: memória só serve
para desenvolvimento, pois um restart perde todos os vínculos e força
criação duplicada no próximo update.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from config.settings.base.core import BaseSettings, Environment, _parse_environment

MappingStoreBackend = Literal["memory", "redis", "firestore"]

_VALID_BACKENDS = ("memory", "redis", "firestore")
DEFAULT_FIRESTORE_COLLECTION = "calendar_mappings"


@dataclass(frozen=True)
class MappingStoreSettings:
    """Configurações do store de mapeamento.

    Attributes:
        backend: Backend de persistência (memory|redis|firestore)
        redis_url: URL de conexão Redis
        ttl_seconds: TTL opcional das chaves no Redis (None = sem expiração)
        gcp_project: Projeto GCP para Firestore
        firestore_collection: Coleção usada no Firestore
    """

    backend: MappingStoreBackend = "memory"
    redis_url: str = ""
    ttl_seconds: int | None = None
    gcp_project: str = ""
    firestore_collection: str = DEFAULT_FIRESTORE_COLLECTION

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações do store.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in _VALID_BACKENDS:
            errors.append(f"MAPPING_STORE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append(
                "MAPPING_STORE_BACKEND=memory perde mapeamentos em restart. "
                "Use redis ou firestore em staging/production."
            )

        if self.backend == "redis" and not self.redis_url:
            errors.append("MAPPING_STORE_BACKEND=redis requer REDIS_URL configurado")

        if self.backend == "firestore" and not self.gcp_project:
            errors.append("MAPPING_STORE_BACKEND=firestore requer GCP_PROJECT configurado")

        if self.ttl_seconds is not None and self.ttl_seconds <= 0:
            errors.append("MAPPING_STORE_TTL_SECONDS deve ser > 0")

        return errors


def _default_backend_for_env(environment: Environment) -> str:
    return "redis" if environment in ("staging", "production") else "memory"


def _parse_ttl(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value)


def _load_mapping_store_from_env() -> MappingStoreSettings:
    """Carrega MappingStoreSettings de variáveis de ambiente."""
    environment = _parse_environment(os.getenv("ENVIRONMENT", "development"))
    backend_str = os.getenv(
        "MAPPING_STORE_BACKEND", _default_backend_for_env(environment)
    ).lower()
    return MappingStoreSettings(
        backend=backend_str,  # type: ignore[arg-type]
        redis_url=os.getenv("REDIS_URL", ""),
        ttl_seconds=_parse_ttl(os.getenv("MAPPING_STORE_TTL_SECONDS")),
        gcp_project=os.getenv("GCP_PROJECT", os.getenv("GOOGLE_CLOUD_PROJECT", "")),
        firestore_collection=os.getenv(
            "MAPPING_STORE_FIRESTORE_COLLECTION", DEFAULT_FIRESTORE_COLLECTION
        ),
    )


@lru_cache(maxsize=1)
def get_mapping_store_settings() -> MappingStoreSettings:
    """Retorna instância cacheada de MappingStoreSettings."""
    return _load_mapping_store_from_env()
