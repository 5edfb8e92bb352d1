"""Agregador de settings do File Gateway.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Upstream settings
from config.settings.upstream import (
    UPSTREAM_DEFAULT_BASE_URL,
    UpstreamSettings,
    get_upstream_settings,
)

__all__ = [
    # Constants
    "UPSTREAM_DEFAULT_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Upstream
    "UpstreamSettings",
    "get_base_settings",
    "get_upstream_settings",
]
