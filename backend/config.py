"""Runtime settings for the REST and dashboard surfaces.

Env vars:
  HOUSEHOLD_API_HOST=127.0.0.1   -> interface the Flask/Dash servers bind to
  HOUSEHOLD_API_PORT=8000        -> REST port (the dashboard uses port + 50)
  HOUSEHOLD_DEBUG=1              -> enable Flask/Dash debug mode
  HOUSEHOLD_LOG_LEVEL=INFO       -> root logging level
  HOUSEHOLD_START_YEAR=2026      -> first simulated year for default households
"""
from __future__ import annotations

import datetime
import logging
import os
from dataclasses import dataclass, field

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppConfig:
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    start_year: int = field(default_factory=lambda: datetime.date.today().year)

    @property
    def dashboard_port(self) -> int:
        return self.port + 50


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw) if raw.strip() else default
    except ValueError:
        return default


def load_config_from_env() -> AppConfig:
    level = os.getenv("HOUSEHOLD_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    return AppConfig(
        host=os.getenv("HOUSEHOLD_API_HOST", "127.0.0.1"),
        port=_int_env("HOUSEHOLD_API_PORT", 8000),
        debug=str(os.getenv("HOUSEHOLD_DEBUG", "")).lower() in TRUTHY,
        log_level=level,
        start_year=_int_env("HOUSEHOLD_START_YEAR", datetime.date.today().year),
    )


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - [%(levelname)s] - %(name)s - %(message)s",
    )
