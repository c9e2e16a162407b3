"""Core de learn-cli: dominio, contratos, servicios y configuración."""

__version__ = "0.1.0"
