"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
Los adaptadores (HTTP) leen la configuración desde aquí.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core import __version__

DEFAULT_HEALTH_URL = "https://partybox.im/api/health"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "learn-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "learn-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "learn-cli"
    return Path.home() / ".config" / "learn-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Orden de carga: variables `LEARN_CLI_*`, luego `.env` del proyecto y por
    último el `.env` global del usuario.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEARN_CLI_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    health_url: str = Field(
        default=DEFAULT_HEALTH_URL,
        min_length=8,
        description="Endpoint consultado por `health`.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=f"learn-cli/{__version__}",
        min_length=1,
        description="User-Agent para el health check.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
