"""Protocolos e contratos do core da aplicação."""

from .upstream_client import UpstreamClientProtocol

__all__ = [
    "UpstreamClientProtocol",
]
