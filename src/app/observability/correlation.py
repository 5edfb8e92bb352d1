"""Correlation_id por requisição.

O middleware HTTP define o valor a partir do header `x-correlation-id`
(ou gera um novo) e o filter de logging o injeta em cada record.
O valor volta no header da resposta, por isso só IDs curtos e
imprimíveis são aceitos do cliente.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "x-correlation-id"
MAX_CORRELATION_ID_LENGTH = 128

_ACCEPTED_CORRELATION_ID = re.compile(r"[A-Za-z0-9._:\-]+")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID recebido do cliente. Vazio, longo demais ou com
            caracteres fora de `[A-Za-z0-9._:-]` é trocado por um UUID v4.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = (correlation_id or "").strip()
    if len(value) > MAX_CORRELATION_ID_LENGTH or not _ACCEPTED_CORRELATION_ID.fullmatch(value):
        value = str(uuid.uuid4())
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)
