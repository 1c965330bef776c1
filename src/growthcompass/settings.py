"""Environment-driven runtime configuration.

``BIND`` / ``PORT`` control the uvicorn listener, ``LOG_LEVEL`` the root
logger, and ``GROWTHCOMPASS_CORS_ORIGINS`` takes a comma-separated list of
front-end origins allowed to call the API.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

_CORS_ENV_VAR: Final = "GROWTHCOMPASS_CORS_ORIGINS"
_DEFAULT_CORS_ORIGINS: Final = ("http://localhost:3000",)
_DEFAULT_LOG_LEVEL: Final = "INFO"


def _parse_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return _DEFAULT_CORS_ORIGINS
    origins = tuple(entry.strip() for entry in raw.split(",") if entry.strip())
    return origins or _DEFAULT_CORS_ORIGINS


def _parse_log_level(raw: str | None) -> str:
    level = (raw or "").strip().upper()
    if level not in logging.getLevelNamesMapping():
        return _DEFAULT_LOG_LEVEL
    return level


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = _DEFAULT_LOG_LEVEL
    cors_origins: tuple[str, ...] = _DEFAULT_CORS_ORIGINS


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        host=env.get("BIND", "0.0.0.0"),
        port=int(env.get("PORT", "8000")),
        log_level=_parse_log_level(env.get("LOG_LEVEL")),
        cors_origins=_parse_origins(env.get(_CORS_ENV_VAR)),
    )
