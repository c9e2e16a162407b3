"""Entry point de la CLI (Typer).

Cada subcomando construye una `Invocation` con el resolver del Core y la
ejecuta con `CommandExecutor`. Los nombres de comando no distinguen
mayúsculas (`READ` == `read`).
"""

from __future__ import annotations

import asyncio
import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from cli import doctor
from cli.ui_components import print_error
from core import __version__
from core.config import AppSettings
from core.domain.errors import CommandError
from core.logging_config import configure_logging
from core.services import CommandExecutor, build_invocation

app = typer.Typer(
    name="learn-cli",
    help="Read files, list directories and check a remote health endpoint.",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"token_normalize_func": str.lower},
)
app.add_typer(doctor.app, name="doctor")

_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"learn-cli {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def app_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print the version."
    ),
) -> None:
    del version
    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_err_console, exc, prefix="Invalid configuration")
        raise typer.Exit(code=1) from exc

    configure_logging(logging.DEBUG if verbose else settings.log_level)
    ctx.obj = settings


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()


def _execute(ctx: typer.Context, verb: str, args: list[str] | None = None) -> None:
    settings = _settings(ctx)
    try:
        invocation = build_invocation(verb, args or [])
        result = asyncio.run(CommandExecutor(settings=settings).execute(invocation))
    except CommandError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc
    typer.echo(result)


@app.command("read")
def read_cmd(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, metavar="FILE", help="File to print."),
) -> None:
    """Print the contents of a file."""

    _execute(ctx, "read", paths)


@app.command("dir")
def dir_cmd(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, metavar="PATH", help="Directory to list."),
) -> None:
    """List directory entries, one per line."""

    _execute(ctx, "dir", paths)


@app.command("health")
def health_cmd(ctx: typer.Context) -> None:
    """Call the remote health endpoint and print the response body."""

    _execute(ctx, "health")


@app.command("help")
def help_cmd(ctx: typer.Context) -> None:
    """Print the help text."""

    _execute(ctx, "help")


@app.command("version")
def version_cmd(ctx: typer.Context) -> None:
    """Print the version."""

    _execute(ctx, "version")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
