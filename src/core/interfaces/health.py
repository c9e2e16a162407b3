"""Contrato del health check.

`HealthChecker` aísla la llamada HTTP al endpoint fijo para que los tests
puedan sustituirla por un stub sin red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HealthChecker(Protocol):
    """Contrato mínimo para el health check remoto.

    - `check` es asíncrono porque hace I/O (HTTP).
    - Devuelve el cuerpo de la respuesta como texto.
    - Los fallos se elevan como `HealthCheckError`.
    """

    async def check(self) -> str:
        ...
