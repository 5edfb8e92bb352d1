"""Settings do serviço upstream de arquivos.

O cliente HTTP recebe esta estrutura no construtor; nada lê o ambiente
diretamente fora de `get_upstream_settings`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

UPSTREAM_DEFAULT_BASE_URL: str = "https://echo-serv.tbxnet.com/v1/secret"


@dataclass(frozen=True)
class UpstreamSettings:
    """Configurações de acesso ao upstream.

    Attributes:
        base_url: URL base (sem barra final) que expõe /files e /file/{name}
        api_key: Credencial estática enviada no header Authorization
        request_timeout_seconds: Timeout por requisição
        max_concurrency: Limite de downloads simultâneos na agregação
    """

    base_url: str = UPSTREAM_DEFAULT_BASE_URL
    api_key: str = ""
    request_timeout_seconds: float = 30.0
    max_concurrency: int = 5

    @property
    def files_endpoint(self) -> str:
        """URL da listagem de arquivos."""
        return f"{self.base_url.rstrip('/')}/files"

    def get_file_endpoint(self, quoted_name: str) -> str:
        """URL de download de um arquivo (nome já codificado)."""
        return f"{self.base_url.rstrip('/')}/file/{quoted_name}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do upstream.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.base_url.startswith(("http://", "https://")):
            errors.append("API_URL deve começar com http:// ou https://")

        if not self.api_key:
            errors.append("API_KEY não configurado")
        elif not self.api_key.isascii():
            errors.append("API_KEY deve conter apenas caracteres ASCII")

        if self.request_timeout_seconds <= 0:
            errors.append("UPSTREAM_TIMEOUT_SECONDS deve ser > 0")

        if self.max_concurrency < 1:
            errors.append("UPSTREAM_MAX_CONCURRENCY deve ser >= 1")

        return errors


def _load_from_env() -> UpstreamSettings:
    """Carrega UpstreamSettings a partir de variáveis de ambiente."""
    return UpstreamSettings(
        base_url=os.getenv("API_URL", UPSTREAM_DEFAULT_BASE_URL),
        api_key=os.getenv("API_KEY", ""),
        request_timeout_seconds=float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "30")),
        max_concurrency=int(os.getenv("UPSTREAM_MAX_CONCURRENCY", "5")),
    )


@lru_cache(maxsize=1)
def get_upstream_settings() -> UpstreamSettings:
    """Retorna instância cacheada de UpstreamSettings."""
    return _load_from_env()
