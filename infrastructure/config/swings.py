from __future__ import annotations

import os

from domain.indicators.swings import SwingTrendSettings
from domain.value_objects.timeframe import Timeframe


def _int_from_env(var_name: str, default: int) -> int:
    value = os.getenv(var_name)
    if value is None:
        return default
    parsed = int(value)
    if parsed <= 0:
        raise ValueError(f"{var_name} must be greater than zero.")
    return parsed


def _timeframe_from_env(var_name: str, default: Timeframe) -> Timeframe:
    value = os.getenv(var_name)
    if value is None:
        return default
    return Timeframe.parse(value)


def load_swing_settings() -> SwingTrendSettings:
    """Load HTF swing trend settings from environment variables."""
    return SwingTrendSettings(
        period=_int_from_env("SWING_PERIOD", 5),
        lookback=_int_from_env("SWING_LOOKBACK_PERIOD", 200),
        swing_timeframe=_timeframe_from_env("SWING_TIMEFRAME", Timeframe.ONE_HOUR),
    )
