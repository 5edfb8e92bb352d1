"""Entrypoint do File Gateway.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import create_upstream_client, initialize_app, validate_runtime_settings
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from config.settings import get_base_settings, get_upstream_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from fastapi import Response

    from app.protocols.upstream_client import UpstreamClientProtocol

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida settings e cria o cliente upstream (se não injetado).
    Shutdown: fecha o cliente criado aqui.
    """
    logger.info("app_starting")
    validate_runtime_settings()

    owned_client = None
    if getattr(app.state, "upstream_client", None) is None:
        owned_client = create_upstream_client(app.state.upstream_settings)
        app.state.upstream_client = owned_client

    yield

    logger.info("app_shutting_down")
    if owned_client is not None:
        await owned_client.aclose()
        app.state.upstream_client = None


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga x-correlation-id da requisição para logs e resposta."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


def create_app(upstream_client: UpstreamClientProtocol | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        upstream_client: Cliente já construído (testes). Sem ele, o
            lifespan cria um a partir das settings do ambiente.

    Returns:
        Aplicação FastAPI configurada.
    """
    base_settings = get_base_settings()

    fastapi_app = FastAPI(
        debug=base_settings.debug,
        title="File Gateway",
        description="Lista e converte arquivos CSV do serviço upstream em registros validados",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    fastapi_app.state.upstream_settings = get_upstream_settings()
    fastapi_app.state.upstream_client = upstream_client

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(base_settings.cors_allow_origins),
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    fastapi_app.include_router(
        create_api_router(include_mocked=base_settings.mocked_routes_enabled)
    )

    logger.info("app_configured", extra={"debug": base_settings.debug})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting File Gateway in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
