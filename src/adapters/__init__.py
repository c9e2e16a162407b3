"""Adaptadores de I/O externo (HTTP)."""
