from __future__ import annotations

import os

import pytest

from core.config import AppSettings


class StubHealthChecker:
    def __init__(self, body: str = "ok", error: Exception | None = None) -> None:
        self.body = body
        self.error = error
        self.calls = 0

    async def check(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path) -> None:
    for key in list(os.environ):
        if key.upper().startswith("LEARN_CLI_"):
            monkeypatch.delenv(key, raising=False)
    # Only the (empty) .env of the temp cwd is read; the per-user config is skipped.
    monkeypatch.chdir(tmp_path)
    monkeypatch.setitem(AppSettings.model_config, "env_file", ".env")


@pytest.fixture
def stub_health() -> StubHealthChecker:
    return StubHealthChecker(body='{"status":"ok"}')
