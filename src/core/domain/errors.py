"""Errores del dominio.

Todos heredan de `CommandError`; `str(exc)` es el mensaje que ve el usuario.
Ninguno se reintenta: cualquier fallo termina la invocación.
"""

from __future__ import annotations


class CommandError(Exception):
    """Base error for command resolution and execution."""


class UnrecognizedCommandError(CommandError):
    def __init__(self, verb: str) -> None:
        self.verb = verb
        super().__init__(f"unrecognized command: {verb!r}")


class MissingArgumentError(CommandError):
    """A required positional argument was not supplied."""


class OperationIOError(CommandError):
    """File-system failure (missing path, permission denied, wrong type)."""


class HealthCheckError(CommandError):
    """Transport or HTTP failure while calling the health endpoint."""
