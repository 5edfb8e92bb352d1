"""Connectors — adapters de borda para APIs externas.

Estrutura:
- upstream/: serviço remoto que armazena os arquivos CSV
"""

__all__: list[str] = []
