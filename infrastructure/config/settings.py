from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class AppEnvironment(str, Enum):
    DEV = "DEV"
    PAPER = "PAPER"
    PROD = "PROD"


def _parse_log_level(value: str | None) -> int:
    if value is None:
        return logging.INFO

    if value.isdigit():
        return int(value)

    normalized = value.upper()
    return logging._nameToLevel.get(normalized, logging.INFO)


def _parse_flag(value: str | None) -> bool:
    return value is not None and value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    env: AppEnvironment
    data_dir: Path
    log_level: int


def load_settings() -> Settings:
    env_value = os.getenv("APP_ENV", AppEnvironment.DEV.value).upper()
    try:
        env = AppEnvironment(env_value)
    except ValueError as exc:
        raise ValueError(f"Invalid APP_ENV value: {env_value}. Use DEV, PAPER, or PROD.") from exc

    data_dir = Path(os.getenv("MARKET_DATA_DIR", "data"))
    log_level = _parse_log_level(os.getenv("LOG_LEVEL"))
    # Swing pipeline diagnostics are only emitted at DEBUG.
    if _parse_flag(os.getenv("SWING_DEBUG")):
        log_level = logging.DEBUG

    return Settings(env=env, data_dir=data_dir, log_level=log_level)
