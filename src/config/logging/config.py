"""Configuração centralizada de logging.

Um único handler JSON no logger raiz. O filter deste módulo injeta
`service` e `correlation_id` em todo record, então os módulos só passam
o contexto específico do evento via `extra`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "file-gateway"


class CorrelationIdFilter(logging.Filter):
    """Carimba service e correlation_id da requisição em cada record.

    Um correlation_id passado via `extra` tem precedência sobre o getter.
    Nunca descarta records.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = (
            getattr(record, "correlation_id", None) or self._get_correlation_id()
        )
        record.service = self.service_name
        return True


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Chamada uma vez por `app.bootstrap.initialize_app`, com o nome vindo
    de SERVICE_NAME.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Valor do campo `service` em todos os logs.
        correlation_id_getter: Retorna o correlation_id da requisição atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_skip(
    logger: logging.Logger,
    component: str,
    item: str,
    reason: str | None = None,
) -> None:
    """Registra item descartado silenciosamente por um componente.

    O descarte não faz parte da resposta HTTP; fica apenas no log.

    Exemplo:
        log_skip(logger, "aggregator", "a.csv", reason="not_found")
    """
    extra: dict[str, object] = {
        "skipped": True,
        "component": component,
        "item": item,
    }
    if reason:
        extra["reason"] = reason

    logger.info(
        "Skipped %s in %s",
        item,
        component,
        extra=extra,
    )
