"""
Fractal swing detection on the higher timeframe.

A bar is a swing high when its high is strictly above every other high within
``period // 2`` bars on each side (symmetrically for swing lows). Candidates are
only evaluated once ``period // 2`` closed bars exist to their right, so an
emitted swing is never revised by later bars.
"""

from __future__ import annotations

import logging

from domain.entities.bar_series import BarSeries
from domain.exceptions.errors import BarNotFoundError
from domain.indicators.swings.bar_index import BarIndexMapper
from domain.value_objects.trend import Swing, SwingType

logger = logging.getLogger(__name__)


def is_swing_high(series: BarSeries, index: int, period: int) -> bool:
    middle = period // 2
    if index - middle < 0 or index + middle >= len(series):
        return False

    pivot = series[index].high
    return all(
        series[j].high < pivot
        for j in range(index - middle, index + middle + 1)
        if j != index
    )


def is_swing_low(series: BarSeries, index: int, period: int) -> bool:
    middle = period // 2
    if index - middle < 0 or index + middle >= len(series):
        return False

    pivot = series[index].low
    return all(
        series[j].low > pivot
        for j in range(index - middle, index + middle + 1)
        if j != index
    )


class FractalSwingDetector:
    """Scan the HTF lookback window for confirmed fractal swings."""

    def __init__(self, period: int = 5, lookback: int = 200) -> None:
        self.period = period
        self.lookback = lookback

    def detect(self, mapper: BarIndexMapper, current_index: int) -> tuple[list[Swing], list[Swing]]:
        """
        Detect swing highs and lows up to ``current_index`` (latest closed HTF bar).

        Returns:
            (highs, lows), each ordered most-recent-first and capped at ``lookback``.
            Both are empty while fewer than ``lookback`` HTF bars precede ``current_index``.
        """
        highs: list[Swing] = []
        lows: list[Swing] = []

        if current_index < self.lookback:
            return highs, lows

        middle = self.period // 2
        search_start = current_index - middle
        search_stop = current_index - self.lookback + middle

        for idx in range(search_start, search_stop, -1):
            if len(highs) < self.lookback and is_swing_high(mapper.htf, idx, self.period):
                swing = self._resolve(mapper, idx, SwingType.HIGH)
                if swing is not None:
                    highs.append(swing)

            if len(lows) < self.lookback and is_swing_low(mapper.htf, idx, self.period):
                swing = self._resolve(mapper, idx, SwingType.LOW)
                if swing is not None:
                    lows.append(swing)

        logger.debug(
            "Fractal scan at HTF index %d: %d highs, %d lows", current_index, len(highs), len(lows)
        )
        return highs, lows

    @staticmethod
    def _resolve(mapper: BarIndexMapper, htf_index: int, swing_type: SwingType) -> Swing | None:
        try:
            swing = mapper.build_swing(htf_index, swing_type)
        except BarNotFoundError:
            logger.debug("Skipping swing %s at HTF index %d: no chart candle", swing_type.value, htf_index)
            return None

        logger.debug(
            "Swing %s detected at HTF index %d (%s), chart candle %s",
            swing_type.value,
            htf_index,
            swing.price,
            swing.chart_open_time.isoformat(),
        )
        return swing
