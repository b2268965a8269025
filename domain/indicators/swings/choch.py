"""
Change of Character (CHoCH) detection.

A bullish CHoCH needs the previous highs to be declining (or a previous trend
that was not bullish), a new high above the prior one, and the HTF candle of
that new high closing above the prior high. Bearish is symmetric on the lows.
"""

from __future__ import annotations

import logging

from domain.indicators.swings.bar_index import BarIndexMapper
from domain.indicators.swings.models import ChochResult, SwingSeries
from domain.value_objects.trend import ChochState, TrendDirection

logger = logging.getLogger(__name__)


class ChochDetector:
    """Detect bullish/bearish CHoCH on the three most recent highs and lows."""

    def detect(
        self,
        swings: SwingSeries,
        mapper: BarIndexMapper,
        previous_direction: TrendDirection,
        has_previous_trend: bool,
    ) -> ChochResult:
        if not swings.has_depth(3):
            return ChochResult()

        sh0, sh1, sh2 = swings.high_prices()
        sl0, sl1, sl2 = swings.low_prices()
        hh1_close = mapper.htf_close(swings.highs[0])
        ll1_close = mapper.htf_close(swings.lows[0])

        bullish_break = sh0 > sh1 and hh1_close is not None and hh1_close > sh1
        prev_highs_declining = sh1 < sh2
        bullish_by_structure = prev_highs_declining and bullish_break
        prev_not_bullish = (
            previous_direction is not TrendDirection.BULLISH if has_previous_trend else prev_highs_declining
        )
        bullish_by_prev = prev_not_bullish and bullish_break

        bearish_break = sl0 < sl1 and ll1_close is not None and ll1_close < sl1
        prev_lows_rising = sl1 > sl2
        bearish_by_structure = prev_lows_rising and bearish_break
        prev_not_bearish = (
            previous_direction is not TrendDirection.BEARISH if has_previous_trend else prev_lows_rising
        )
        bearish_by_prev = prev_not_bearish and bearish_break

        logger.debug(
            "CHoCH analysis: prev=%s has_prev=%s bullish_by_structure=%s bearish_by_structure=%s",
            previous_direction.value,
            has_previous_trend,
            bullish_by_structure,
            bearish_by_structure,
        )

        if bullish_by_structure and bearish_by_structure:
            return self._resolve_dual(swings, previous_direction, has_previous_trend)

        if bullish_by_prev:
            return ChochResult(state=ChochState.BULLISH)
        if bearish_by_prev:
            return ChochResult(state=ChochState.BEARISH)

        return ChochResult()

    @staticmethod
    def _resolve_dual(
        swings: SwingSeries,
        previous_direction: TrendDirection,
        has_previous_trend: bool,
    ) -> ChochResult:
        """The most recent CHoCH wins; the older one is a liquidity grab if the winner resumes the trend."""
        high_time = swings.highs[0].htf_open_time
        low_time = swings.lows[0].htf_open_time

        if high_time > low_time:
            winner, direction = ChochState.BULLISH, TrendDirection.BULLISH
        else:
            winner, direction = ChochState.BEARISH, TrendDirection.BEARISH

        is_sweep = has_previous_trend and previous_direction is direction
        logger.debug(
            "Dual CHoCH: %s wins (high %s, low %s), liquidity sweep=%s",
            winner.value,
            high_time.isoformat(),
            low_time.isoformat(),
            is_sweep,
        )
        return ChochResult(state=winner, is_liquidity_sweep=is_sweep)
