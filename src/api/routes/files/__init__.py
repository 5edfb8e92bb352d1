"""Rotas de listagem e leitura de arquivos do upstream."""
