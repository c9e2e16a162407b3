"""Command execution.

`CommandExecutor` turns an `Invocation` into a result string. File operations
are blocking; the health check is the only awaited call and goes through an
injectable `HealthChecker`.
"""

from __future__ import annotations

import logging
import os

from core import __version__
from core.config import AppSettings
from core.domain.errors import MissingArgumentError, OperationIOError
from core.domain.models import Invocation, OperationKind
from core.interfaces.health import HealthChecker

logger = logging.getLogger(__name__)

HELP_TEXT = """\
learn-cli: a tiny file and health-check tool.

Commands:
  read <file>    print the contents of a file
  dir <path>     list directory entries, one per line
  health         call the remote health endpoint and print its body
  help           show this message
  version        print the version"""

VERSION_TEXT = f"learn-cli {__version__}"


def read_file(path: str | None) -> str:
    if not path:
        raise MissingArgumentError("missing file path")
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise OperationIOError(str(exc)) from exc


def read_directory(path: str | None) -> str:
    """Entry names of `path`, newline-joined, in the order the OS lists them."""

    if not path:
        raise MissingArgumentError("missing directory path")
    try:
        names = os.listdir(path)
    except OSError as exc:
        raise OperationIOError(str(exc)) from exc
    return "\n".join(names)


class CommandExecutor:
    """Runs one `Invocation` and returns its output."""

    def __init__(
        self,
        health_checker: HealthChecker | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._health_checker = health_checker

    def _checker(self) -> HealthChecker:
        if self._health_checker is None:
            # Lazy import: file-only commands never load httpx.
            from adapters.http_client import HttpHealthChecker  # noqa: PLC0415

            self._health_checker = HttpHealthChecker(self._settings)
        return self._health_checker

    async def execute(self, invocation: Invocation) -> str:
        kind = invocation.kind
        logger.debug("executing %s with args=%r", kind.label(), invocation.args)

        if kind is OperationKind.HELP:
            return HELP_TEXT
        if kind is OperationKind.VERSION:
            return VERSION_TEXT
        if kind is OperationKind.READ_FILE:
            return read_file(invocation.first_arg())
        if kind is OperationKind.READ_DIRECTORY:
            return read_directory(invocation.first_arg())
        if kind is OperationKind.HEALTH_CHECK:
            return await self._checker().check()
        raise AssertionError(f"unhandled operation: {kind!r}")
