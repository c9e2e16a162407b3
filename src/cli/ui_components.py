"""Componentes de UI para CLI (Rich).

Separa los detalles visuales de la lógica de comandos.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text


def print_error(console: Console, exc: Exception, *, prefix: str = "Error") -> None:
    """Imprime `<prefix>: <mensaje>` sin interpretar markup del mensaje."""

    line = Text()
    line.append(f"{prefix}: ", style="bold red")
    line.append(str(exc))
    console.print(line, soft_wrap=True)


def build_doctor_table() -> Table:
    table = Table(title="learn-cli doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
