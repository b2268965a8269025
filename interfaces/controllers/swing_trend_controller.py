from __future__ import annotations

from datetime import datetime

from application.use_cases.classify_swing_trend import ClassifySwingTrend
from application.use_cases.fetch_swing_series import FetchSwingSeries
from domain.indicators.swings import SwingTrendSettings, SwingTrendSignal
from domain.value_objects.timeframe import Timeframe


class SwingTrendController:
    """Controller fetching both series once and running the swing trend classification."""

    def __init__(self, fetch_series: FetchSwingSeries) -> None:
        self.fetch_series = fetch_series

    def analyze(
        self,
        symbol: str,
        timeframe: Timeframe,
        settings: SwingTrendSettings,
        end: datetime | None = None,
    ) -> SwingTrendSignal:
        chart, higher = self.fetch_series.execute(symbol, timeframe, settings.swing_timeframe, end=end)
        return ClassifySwingTrend(swing_settings=settings).execute(timeframe, chart, higher)

    def history(
        self,
        symbol: str,
        timeframe: Timeframe,
        settings: SwingTrendSettings,
        end: datetime | None = None,
    ) -> list[SwingTrendSignal]:
        chart, higher = self.fetch_series.execute(symbol, timeframe, settings.swing_timeframe, end=end)
        return ClassifySwingTrend(swing_settings=settings).replay(timeframe, chart, higher)
