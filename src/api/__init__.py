"""API — camada de borda.

Subpastas:
- connectors/: clientes HTTP para serviços externos (upstream de arquivos)
- routes/: endpoints HTTP

NÃO PODE conter: regras de parse/validação de registros (ficam em app/services).
"""
