from __future__ import annotations

from typing import Sequence

from domain.entities.bar_series import BarSeries
from domain.entities.candle import Candle
from domain.indicators.swings import SwingTrendIndicator, SwingTrendSettings, SwingTrendSignal
from domain.value_objects.timeframe import Timeframe


class ClassifySwingTrend:
    """Use case for classifying the HTF swing structure from provided candles."""

    def __init__(self, swing_settings: SwingTrendSettings) -> None:
        self.swing_settings = swing_settings

    def execute(
        self,
        chart_timeframe: Timeframe,
        chart_candles: Sequence[Candle],
        swing_candles: Sequence[Candle],
    ) -> SwingTrendSignal:
        """Classify the structure at the latest closed HTF bar (candles in either order)."""
        indicator = SwingTrendIndicator(settings=self.swing_settings)
        return indicator.analyze(*self._build_series(chart_timeframe, chart_candles, swing_candles))

    def replay(
        self,
        chart_timeframe: Timeframe,
        chart_candles: Sequence[Candle],
        swing_candles: Sequence[Candle],
    ) -> list[SwingTrendSignal]:
        """Classify the structure at every HTF bar close, oldest first."""
        indicator = SwingTrendIndicator(settings=self.swing_settings)
        return indicator.replay(*self._build_series(chart_timeframe, chart_candles, swing_candles))

    def _build_series(
        self,
        chart_timeframe: Timeframe,
        chart_candles: Sequence[Candle],
        swing_candles: Sequence[Candle],
    ) -> tuple[BarSeries, BarSeries]:
        chart = BarSeries(timeframe=chart_timeframe, candles=chart_candles)
        higher = BarSeries(timeframe=self.swing_settings.swing_timeframe, candles=swing_candles)
        return chart, higher
