"""Connector do serviço upstream de arquivos."""

from api.connectors.upstream.http_client import (
    UpstreamHttpClient,
    create_upstream_client,
)

__all__ = [
    "UpstreamHttpClient",
    "create_upstream_client",
]
