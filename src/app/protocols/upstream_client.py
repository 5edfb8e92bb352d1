"""Contrato do cliente do serviço upstream de arquivos.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Protocol


class UpstreamClientProtocol(Protocol):
    """Contrato mínimo para listar e baixar arquivos do upstream.

    Implementações levantam `UpstreamNotFoundError` (apenas em fetch_file)
    ou `UpstreamUnavailableError`; nunca exceções de transporte.
    """

    async def list_files(self) -> list[str]: ...

    async def fetch_file(self, name: str) -> str: ...
