"""Servicios del Core: resolución y ejecución de comandos."""

from core.services.executor import HELP_TEXT, CommandExecutor, read_directory, read_file
from core.services.resolver import build_invocation, resolve_command

__all__ = [
    "HELP_TEXT",
    "CommandExecutor",
    "build_invocation",
    "read_directory",
    "read_file",
    "resolve_command",
]
