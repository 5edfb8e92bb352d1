"""Settings base do File Gateway.

Configurações comuns ao serviço HTTP (ambiente, logging, CORS, rotas mock).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from config.logging.config import VALID_LOG_LEVELS

Environment = Literal["development", "staging", "production"]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        log_level: Nível de log do handler raiz
        cors_allow_origins: Origens liberadas no CORS
        mocked_routes_enabled: Expõe /mocked/* (upstream simulado)
    """

    # Ambiente
    environment: Environment = "development"
    service_name: str = "file-gateway"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP
    cors_allow_origins: tuple[str, ...] = ("*",)
    mocked_routes_enabled: bool = True

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        if self.is_production and "*" in self.cors_allow_origins:
            errors.append("CORS_ALLOW_ORIGINS não deve usar '*' em produção")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


def _parse_bool(raw: str) -> bool:
    return raw.lower() in ("true", "1", "yes")


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    environment = _parse_environment(os.getenv("ENVIRONMENT", "development"))
    default_mocked = "false" if environment == "production" else "true"
    return BaseSettings(
        environment=environment,
        service_name=os.getenv("SERVICE_NAME", "file-gateway"),
        debug=_parse_bool(os.getenv("DEBUG", "")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_allow_origins=_parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
        mocked_routes_enabled=_parse_bool(
            os.getenv("MOCKED_ROUTES_ENABLED", default_mocked)
        ),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
