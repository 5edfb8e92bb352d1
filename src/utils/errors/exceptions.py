"""Exceções de domínio para falhas de infraestrutura e do serviço upstream."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""


class UpstreamError(InfrastructureError):
    """Falha ao conversar com o serviço upstream de arquivos.

    Args:
        message: Descrição curta, sem credenciais.
        status_code: Status HTTP do upstream, quando houver resposta.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamNotFoundError(UpstreamError):
    """Upstream respondeu 404 para o arquivo solicitado."""


class UpstreamUnavailableError(UpstreamError):
    """Qualquer outra falha do upstream (timeout, rede, 5xx, payload inválido)."""
