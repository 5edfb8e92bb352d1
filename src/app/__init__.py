"""App — orquestração, serviços e wiring.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, factories)
- domain/: modelos de arquivo e registro
- services/: parse, recuperação individual e agregação
- protocols/: contratos (cliente upstream)
- observability/: correlation_id

Padrão: app executa; api adapta; config configura; utils apoia.
"""
