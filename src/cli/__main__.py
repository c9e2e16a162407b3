"""Allows `python -m cli ...` during development."""

from __future__ import annotations

import sys

# cp1252 Windows consoles cannot encode arbitrary file contents.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run  # noqa: E402

run()
