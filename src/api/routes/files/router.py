"""Endpoints de arquivos.

Endpoints:
- GET /files: nomes disponíveis no upstream
- GET /file/{name}: registros válidos de um arquivo
- GET /files/data: registros de todos os arquivos com ao menos uma linha válida

Falhas do upstream viram respostas JSON com mensagem fixa; o detalhe
fica só no log.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.routes.dependencies import get_max_concurrency, get_upstream_client
from app.domain.file_records import (
    FILES_LIST_FAILED_MESSAGE,
    ErrorResponse,
    FileListResponse,
    FileResult,
    RetrievalStatus,
)
from app.protocols.upstream_client import UpstreamClientProtocol  # noqa: TC001 - resolvido em runtime pelo FastAPI
from app.services.aggregator import aggregate_files
from app.services.file_retriever import error_message_for, retrieve_file, to_file_result
from utils.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter()

_STATUS_CODES = {
    RetrievalStatus.OK: status.HTTP_200_OK,
    RetrievalStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    RetrievalStatus.UNAVAILABLE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


@router.get(
    "/files",
    response_model=FileListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Lista os arquivos disponíveis no upstream.",
)
async def list_files(
    client: UpstreamClientProtocol = Depends(get_upstream_client),
) -> JSONResponse:
    try:
        files = await client.list_files()
    except UpstreamUnavailableError as exc:
        logger.error(
            "files_list_failed",
            extra={"status_code": exc.status_code, "detail": str(exc)},
        )
        return _error_response(FILES_LIST_FAILED_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(content=FileListResponse(files=files).model_dump())


@router.get(
    "/file/{name}",
    response_model=FileResult,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Baixa um arquivo e devolve suas linhas válidas.",
)
async def get_file(
    name: str,
    client: UpstreamClientProtocol = Depends(get_upstream_client),
) -> JSONResponse:
    """Falhas viram status HTTP (404/500) em vez de dados."""
    outcome = await retrieve_file(client, name)
    status_code = _STATUS_CODES[outcome.status]
    if not outcome.ok:
        return _error_response(error_message_for(outcome) or "", status_code)
    payload = to_file_result(outcome).model_dump(exclude_none=True)
    return JSONResponse(content=payload, status_code=status_code)


@router.get(
    "/files/data",
    response_model=list[FileResult],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="Agrega as linhas válidas de todos os arquivos.",
)
async def get_files_data(
    client: UpstreamClientProtocol = Depends(get_upstream_client),
    max_concurrency: int = Depends(get_max_concurrency),
) -> JSONResponse:
    """Somente a falha da listagem é fatal; falhas por arquivo são descartadas."""
    try:
        results = await aggregate_files(client, max_concurrency=max_concurrency)
    except UpstreamUnavailableError as exc:
        logger.error(
            "files_data_failed",
            extra={"status_code": exc.status_code, "detail": str(exc)},
        )
        return _error_response(FILES_LIST_FAILED_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(content=[result.model_dump(exclude_none=True) for result in results])
