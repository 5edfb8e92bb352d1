"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.files.router import router as files_router
from api.routes.health.router import router as health_router
from api.routes.mocked.router import router as mocked_router


def create_api_router(*, include_mocked: bool = True) -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Args:
        include_mocked: Registra o upstream simulado em /mocked.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(files_router, tags=["files"])

    if include_mocked:
        api_router.include_router(mocked_router, prefix="/mocked", tags=["mocked"])

    return api_router
