"""Cliente HTTP do serviço upstream de arquivos.

Endpoints consumidos:
- GET {base}/files        -> {"files": [...]}
- GET {base}/file/{name}  -> corpo CSV (texto)

Toda requisição leva `Authorization: <api_key>`. Sem retry: cada
operação faz exatamente uma chamada. Falhas viram
UpstreamNotFoundError/UpstreamUnavailableError; exceções do httpx nunca
saem deste módulo.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from utils.errors import UpstreamNotFoundError, UpstreamUnavailableError

if TYPE_CHECKING:
    from config.settings import UpstreamSettings

logger: logging.Logger = logging.getLogger(__name__)


class UpstreamHttpClient:
    """Cliente assíncrono para o upstream de arquivos.

    Args:
        settings: URL base, credencial e timeout.
        http_client: httpx.AsyncClient injetado (testes, lifespan). Sem ele,
            o cliente cria e passa a ser dono do próprio AsyncClient.
    """

    def __init__(
        self,
        settings: UpstreamSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=settings.request_timeout_seconds,
        )

    @property
    def settings(self) -> UpstreamSettings:
        return self._settings

    async def list_files(self) -> list[str]:
        """Lista os nomes de arquivos disponíveis.

        Raises:
            UpstreamUnavailableError: Falha de transporte, status não-2xx
                (404 inclusive) ou payload fora do formato esperado.
        """
        response = await self._get(self._settings.files_endpoint, operation="list_files")
        if not response.is_success:
            raise UpstreamUnavailableError(
                "upstream_list_failed",
                status_code=response.status_code,
            )
        return _parse_file_list(response)

    async def fetch_file(self, name: str) -> str:
        """Baixa o corpo bruto de um arquivo.

        Raises:
            UpstreamNotFoundError: Upstream respondeu 404.
            UpstreamUnavailableError: Qualquer outra falha.
        """
        url = self._settings.get_file_endpoint(quote(name, safe=""))
        response = await self._get(url, operation="fetch_file")
        if response.status_code == httpx.codes.NOT_FOUND:
            raise UpstreamNotFoundError("upstream_file_not_found", status_code=404)
        if not response.is_success:
            raise UpstreamUnavailableError(
                "upstream_fetch_failed",
                status_code=response.status_code,
            )
        return response.text

    async def aclose(self) -> None:
        """Fecha o AsyncClient se ele foi criado por este cliente."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def _get(self, url: str, *, operation: str) -> httpx.Response:
        started_at = time.perf_counter()
        try:
            response = await self._http_client.get(url, headers=self._build_headers())
        except httpx.HTTPError as exc:
            logger.warning(
                "upstream_request_failed",
                extra={"operation": operation, "error_type": type(exc).__name__},
            )
            raise UpstreamUnavailableError(f"upstream_transport_error: {type(exc).__name__}") from exc
        except UnicodeEncodeError as exc:
            # Cabeçalhos HTTP só aceitam ASCII
            logger.warning(
                "upstream_request_failed",
                extra={"operation": operation, "error_type": "invalid_credential_encoding"},
            )
            raise UpstreamUnavailableError("upstream_invalid_credential_encoding") from exc

        logger.info(
            "upstream_request_completed",
            extra={
                "operation": operation,
                "status_code": response.status_code,
                "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
            },
        )
        return response

    def _build_headers(self) -> dict[str, str]:
        # Credencial enviada crua, sem esquema (Bearer etc.)
        return {"Authorization": self._settings.api_key}


def _parse_file_list(response: httpx.Response) -> list[str]:
    try:
        data: Any = response.json()
    except ValueError as exc:
        raise UpstreamUnavailableError(
            "upstream_list_invalid_json",
            status_code=response.status_code,
        ) from exc

    files = data.get("files") if isinstance(data, dict) else None
    if not isinstance(files, list) or not all(isinstance(item, str) for item in files):
        raise UpstreamUnavailableError(
            "upstream_list_invalid_payload",
            status_code=response.status_code,
        )
    return files


def create_upstream_client(
    settings: UpstreamSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> UpstreamHttpClient:
    """Factory do cliente upstream com settings do ambiente por padrão."""
    # Import local para evitar dependência circular
    from config.settings import get_upstream_settings

    return UpstreamHttpClient(
        settings=settings or get_upstream_settings(),
        http_client=http_client,
    )
