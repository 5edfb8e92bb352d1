"""Modelos de domínio de arquivos e registros."""
