"""Upstream simulado para desenvolvimento local."""
