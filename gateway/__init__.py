"""Ferramentas de linha de comando do gateway."""
