"""
Liquidity sweep detection on the three most recent swings.

Bullish trend (lows):
- Case 1: LL2 swept below LL3 and price reversed (LL1 > LL2, HH1 > HH2).
- Case 2: new low (LL1 < LL2) rejected: its candle closed back above LL2 or HH1 > HH2.
Bearish trend mirrors both cases on the highs.
"""

from __future__ import annotations

import logging

from domain.indicators.swings.bar_index import BarIndexMapper
from domain.indicators.swings.models import SwingSeries
from domain.value_objects.trend import TrendDirection

logger = logging.getLogger(__name__)


class LiquiditySweepDetector:
    def detect(self, swings: SwingSeries, mapper: BarIndexMapper, direction: TrendDirection) -> bool:
        if not swings.has_depth(3):
            return False

        high0, high1, high2 = swings.high_prices()
        low0, low1, low2 = swings.low_prices()

        if direction is TrendDirection.BULLISH:
            ll1_close = mapper.htf_close(swings.lows[0])
            case1 = low1 < low2 and low0 > low1 and high0 > high1
            case2 = low0 < low1 and ((ll1_close is not None and ll1_close > low1) or high0 > high1)
        elif direction is TrendDirection.BEARISH:
            hh1_close = mapper.htf_close(swings.highs[0])
            case1 = high1 > high2 and high0 < high1 and low0 < low1
            case2 = high0 > high1 and ((hh1_close is not None and hh1_close < high1) or low0 < low1)
        else:
            return False

        logger.debug(
            "Liquidity sweep analysis (%s): case1=%s case2=%s", direction.value, case1, case2
        )
        return case1 or case2
