"""Dependências FastAPI compartilhadas pelas rotas."""

from __future__ import annotations

from fastapi import Request

from app.protocols.upstream_client import UpstreamClientProtocol
from config.settings import get_upstream_settings


def get_upstream_client(request: Request) -> UpstreamClientProtocol:
    """Cliente upstream criado no lifespan (ou injetado em create_app)."""
    client = getattr(request.app.state, "upstream_client", None)
    if client is None:
        raise RuntimeError("upstream_client não inicializado")
    return client


def get_max_concurrency(request: Request) -> int:
    """Limite de downloads simultâneos da agregação."""
    settings = getattr(request.app.state, "upstream_settings", None) or get_upstream_settings()
    return settings.max_concurrency
