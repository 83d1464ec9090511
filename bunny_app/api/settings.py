"""
bunny_app.api.settings

Purpose:
    Centralized configuration for the FastAPI service.
    Keeps deployment flexible and avoids hard-coded app metadata.

Notes:
    - Magic Containers injects PORT; host and log level have service-specific
      variables.
    - The breed catalog and header allow-list are constants, not settings.

Created:
    2026-10-19
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

HOST_ENV = "BUNNY_APP_HOST"
PORT_ENV = "PORT"
LOG_LEVEL_ENV = "BUNNY_APP_LOG_LEVEL"


class Settings(BaseModel):
    service_name: str = Field(default="bunny-magic-containers")
    service_version: str = Field(default="0.1.0")
    page_title: str = Field(default="FastAPI on Magic Containers!")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    log_level: str = Field(default="INFO")


def _env(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def get_settings() -> Settings:
    overrides: dict[str, str] = {}

    host = _env(HOST_ENV)
    if host is not None:
        overrides["host"] = host

    port = _env(PORT_ENV)
    if port is not None:
        overrides["port"] = port

    log_level = _env(LOG_LEVEL_ENV)
    if log_level is not None:
        overrides["log_level"] = log_level.upper()

    return Settings(**overrides)
