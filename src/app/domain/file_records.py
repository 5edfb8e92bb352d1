"""Modelos de dominio para arquivos e registros extraidos.

Record so existe quando a linha satisfaz as tres restricoes de campo;
o parser descarta as demais linhas sem erro.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

HEX32_PATTERN = r"^[0-9a-fA-F]{32}$"

FILE_NOT_FOUND_MESSAGE = "File not found"
FILE_DOWNLOAD_FAILED_MESSAGE = "Failed to download file from external API"
FILES_LIST_FAILED_MESSAGE = "Failed to fetch files from external API"


class Record(BaseModel):
    """Linha valida de um arquivo."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    text: str = Field(..., min_length=1, description="Texto livre, nao vazio.")
    number: int = Field(..., description="Inteiro extraido da coluna number.")
    hex: str = Field(
        ...,
        pattern=HEX32_PATTERN,
        description="Exatamente 32 caracteres hexadecimais.",
    )


class FileResult(BaseModel):
    """Registros validos de um arquivo, ou o erro que impediu obte-los."""

    model_config = ConfigDict(extra="ignore")

    file: str = Field(..., description="Nome do arquivo no upstream.")
    lines: list[Record] = Field(default_factory=list)
    error: str | None = Field(default=None, description="Presente apenas em falhas.")


class FileListResponse(BaseModel):
    """Resposta de GET /files."""

    files: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Corpo de erro devolvido pela API."""

    error: str


class RetrievalStatus(str, Enum):
    """Resultado de uma tentativa de obter um arquivo."""

    OK = "ok"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True, slots=True)
class RetrievalOutcome:
    """Resultado tipado da recuperacao de um arquivo.

    `records` so e preenchido quando status == OK; `detail` e diagnostico
    interno (vai para log, nunca para a resposta).
    """

    file: str
    status: RetrievalStatus
    records: tuple[Record, ...] = field(default_factory=tuple)
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is RetrievalStatus.OK
