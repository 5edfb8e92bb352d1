"""Agregacao de todos os arquivos listados pelo upstream.

Downloads rodam em paralelo com limite de concorrencia; o resultado
segue a ordem da listagem, nunca a ordem de conclusao.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.services.file_retriever import retrieve_file, to_file_result
from config.logging import log_skip

if TYPE_CHECKING:
    from app.domain.file_records import FileResult, RetrievalOutcome
    from app.protocols.upstream_client import UpstreamClientProtocol

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 5


async def aggregate_files(
    client: UpstreamClientProtocol,
    *,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> list[FileResult]:
    """Lista, baixa e converte todos os arquivos do upstream.

    Arquivos com falha de download ou sem nenhuma linha valida sao
    descartados (registrados apenas em log).

    Raises:
        UpstreamUnavailableError: Se a listagem falhar.
    """
    names = await client.list_files()
    if not names:
        return []

    semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def _retrieve_limited(name: str) -> RetrievalOutcome:
        async with semaphore:
            return await retrieve_file(client, name)

    outcomes = await asyncio.gather(*(_retrieve_limited(name) for name in names))

    results: list[FileResult] = []
    for outcome in outcomes:
        if not outcome.ok:
            log_skip(logger, "aggregator", outcome.file, reason=outcome.status.value)
            continue
        if not outcome.records:
            log_skip(logger, "aggregator", outcome.file, reason="no_valid_records")
            continue
        results.append(to_file_result(outcome))

    logger.info(
        "aggregate_completed",
        extra={"listed": len(names), "included": len(results)},
    )
    return results
