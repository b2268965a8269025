"""
Three-swing trend classification.

Bullish structure is read from the lows, bearish structure from the highs; the
opposite leg decides between Momentum and Compression.
"""

from __future__ import annotations

import logging

from domain.indicators.swings.models import SwingSeries
from domain.value_objects.trend import TrendDirection, TrendState, TrendStatus

logger = logging.getLogger(__name__)


def classify_trend(swings: SwingSeries, offset: int = 0) -> TrendState:
    """
    Classify the trend from three highs and three lows starting at ``offset``.

    ``offset=0`` reads the current trend, ``offset=1`` the previous one.
    """
    if not swings.has_depth(3 + offset):
        return TrendState.unclear()

    sh0, sh1, sh2 = swings.high_prices(offset)
    sl0, sl1, sl2 = swings.low_prices(offset)

    if offset == 0:
        logger.debug("Highs: HH3=%s -> HH2=%s -> HH1=%s", sh2, sh1, sh0)
        logger.debug("Lows:  LL3=%s -> LL2=%s -> LL1=%s", sl2, sl1, sl0)

    perfect_bullish = sl2 < sl1 < sl0
    sweep_bullish = sl2 > sl1 and sl0 > sl2
    primary_bullish = (perfect_bullish or sweep_bullish) and sl0 > sl1
    ambiguous_bullish = sl2 > sl1 < sl0

    perfect_bearish = sh2 > sh1 > sh0
    sweep_bearish = sh2 < sh1 and sh0 < sh2
    primary_bearish = (perfect_bearish or sweep_bearish) and sh0 < sh1
    ambiguous_bearish = sh2 < sh1 > sh0

    highs_confirm_bullish = sh0 > sh1
    lows_confirm_bearish = sl0 < sl1

    if primary_bullish:
        status = TrendStatus.MOMENTUM if highs_confirm_bullish else TrendStatus.COMPRESSION
        return TrendState(TrendDirection.BULLISH, status)
    if primary_bearish:
        status = TrendStatus.MOMENTUM if lows_confirm_bearish else TrendStatus.COMPRESSION
        return TrendState(TrendDirection.BEARISH, status)
    if ambiguous_bullish and highs_confirm_bullish:
        return TrendState(TrendDirection.BULLISH, TrendStatus.MOMENTUM)
    if ambiguous_bearish and lows_confirm_bearish:
        return TrendState(TrendDirection.BEARISH, TrendStatus.MOMENTUM)

    return TrendState.unclear()
