"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.http_client import HttpHealthChecker
from cli.ui_components import build_doctor_table
from core import __version__
from core.config import AppSettings, get_user_env_file
from core.domain.errors import HealthCheckError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_health(settings: AppSettings) -> tuple[bool, str]:
    try:
        body = await HttpHealthChecker(settings).check()
    except HealthCheckError as exc:
        return False, str(exc)
    return True, body.strip()[:80] or "(empty body)"


@app.command()
def run() -> None:
    """Show effective settings and call the health endpoint."""

    settings = AppSettings()

    table = build_doctor_table()
    table.add_row("Version", "OK", __version__)

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Health URL", "OK", settings.health_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Log level", "OK", settings.log_level)

    ok_http, detail_http = asyncio.run(_check_health(settings))
    table.add_row("Health endpoint", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] override the endpoint with "
            "LEARN_CLI_HEALTH_URL or in the user config .env."
        )
        raise typer.Exit(code=1)
