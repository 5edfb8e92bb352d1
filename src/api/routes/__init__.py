"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (arquivos, upstream simulado, health)
- Delegar para app/services
- Converter falhas do upstream em respostas HTTP

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
