"""Modelos del dominio (Pydantic v2).

- `OperationKind`: conjunto cerrado de verbos soportados.
- `Invocation`: un verbo resuelto con sus argumentos posicionales.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class OperationKind(str, Enum):
    """Supported command verbs."""

    HELP = "help"
    VERSION = "version"
    READ_FILE = "read"
    READ_DIRECTORY = "dir"
    HEALTH_CHECK = "health"

    def label(self) -> str:
        """Human readable label for logging."""

        return self.name.replace("_", " ").title()


class Invocation(BaseModel):
    """Un comando resuelto más sus argumentos, para una única ejecución.

    Los argumentos se interpretan por posición; hoy solo se consulta el primero
    (ruta de archivo o de directorio).
    """

    model_config = ConfigDict(frozen=True)

    kind: OperationKind = Field(
        ...,
        description="Operación resuelta a partir del verbo.",
    )
    args: tuple[str, ...] = Field(
        default=(),
        description="Argumentos posicionales en el orden de la línea de comandos.",
    )

    def first_arg(self) -> str | None:
        return self.args[0] if self.args else None
