"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    UpstreamError,
    UpstreamNotFoundError,
    UpstreamUnavailableError,
)

__all__ = [
    "InfrastructureError",
    "UpstreamError",
    "UpstreamNotFoundError",
    "UpstreamUnavailableError",
]
