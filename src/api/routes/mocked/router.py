"""Upstream simulado.

Reproduz o contrato do serviço upstream (listagem JSON e corpo CSV) com
três arquivos fixos. Com API_URL=http://localhost:8080/mocked o gateway
consome a si mesmo.
"""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from app.domain.file_records import FILE_NOT_FOUND_MESSAGE, ErrorResponse, FileListResponse

router = APIRouter()

MOCK_FILE_NAMES: tuple[str, ...] = ("file1.csv", "file2.csv", "file3.csv")
MOCK_CSV_HEADER = "file,text,number,hex"
MOCK_CSV_ROW = "{name},RgTya,64075909,70ad29aacf0b690b0467fe2b2767f765"


def build_mock_body(name: str) -> str:
    """Corpo CSV fixo (header + uma linha) para o arquivo informado."""
    return f"{MOCK_CSV_HEADER}\n{MOCK_CSV_ROW.format(name=name)}"


@router.get("/files", response_model=FileListResponse)
async def list_mocked_files() -> FileListResponse:
    """Lista fixa de arquivos."""
    return FileListResponse(files=list(MOCK_FILE_NAMES))


@router.get(
    "/file/{name}",
    response_class=PlainTextResponse,
    responses={
        200: {"content": {"text/csv": {"schema": {"type": "string"}}}},
        404: {"model": ErrorResponse},
    },
)
async def get_mocked_file(name: str) -> Response:
    """Corpo CSV do arquivo, ou 404 se fora da lista."""
    if name not in MOCK_FILE_NAMES:
        return JSONResponse(
            content={"error": FILE_NOT_FOUND_MESSAGE},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return Response(content=build_mock_body(name), media_type="text/csv")
