"""Recuperacao de um unico arquivo: download + parse.

`retrieve_file` nunca propaga falhas do upstream: devolve um
RetrievalOutcome tipado. Cada chamador decide como expor a falha
(`to_file_result` embute o erro nos dados; a rota /file/{name}
converte em status HTTP).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.file_records import (
    FILE_DOWNLOAD_FAILED_MESSAGE,
    FILE_NOT_FOUND_MESSAGE,
    FileResult,
    RetrievalOutcome,
    RetrievalStatus,
)
from app.services.record_parser import parse_records
from utils.errors import UpstreamNotFoundError, UpstreamUnavailableError

if TYPE_CHECKING:
    from app.protocols.upstream_client import UpstreamClientProtocol

logger = logging.getLogger(__name__)

_ERROR_MESSAGES = {
    RetrievalStatus.NOT_FOUND: FILE_NOT_FOUND_MESSAGE,
    RetrievalStatus.UNAVAILABLE: FILE_DOWNLOAD_FAILED_MESSAGE,
}


async def retrieve_file(
    client: UpstreamClientProtocol,
    name: str,
) -> RetrievalOutcome:
    """Baixa e converte um arquivo do upstream.

    Args:
        client: Cliente do upstream.
        name: Nome do arquivo.

    Returns:
        OK com os records (possivelmente vazios), NOT_FOUND ou UNAVAILABLE.
    """
    try:
        body = await client.fetch_file(name)
    except UpstreamNotFoundError as exc:
        logger.info(
            "upstream_file_not_found",
            extra={"file_name": name, "status_code": exc.status_code},
        )
        return RetrievalOutcome(
            file=name,
            status=RetrievalStatus.NOT_FOUND,
            detail=str(exc),
        )
    except UpstreamUnavailableError as exc:
        logger.warning(
            "upstream_file_unavailable",
            extra={"file_name": name, "status_code": exc.status_code, "detail": str(exc)},
        )
        return RetrievalOutcome(
            file=name,
            status=RetrievalStatus.UNAVAILABLE,
            detail=str(exc),
        )

    records = parse_records(body)
    logger.debug(
        "file_parsed",
        extra={"file_name": name, "record_count": len(records)},
    )
    return RetrievalOutcome(
        file=name,
        status=RetrievalStatus.OK,
        records=tuple(records),
    )


def error_message_for(outcome: RetrievalOutcome) -> str | None:
    """Mensagem publica associada ao status (None quando OK)."""
    return _ERROR_MESSAGES.get(outcome.status)


def to_file_result(outcome: RetrievalOutcome) -> FileResult:
    """Converte o outcome em FileResult, embutindo o erro como dado."""
    if outcome.ok:
        return FileResult(file=outcome.file, lines=list(outcome.records))
    return FileResult(file=outcome.file, lines=[], error=error_message_for(outcome))
