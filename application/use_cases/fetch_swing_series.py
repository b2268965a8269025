from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from application.policies.timeframe_policy import TimeframePolicy
from domain.entities.candle import Candle
from domain.services.market_data_service import MarketDataService
from domain.value_objects.timeframe import Timeframe

logger = logging.getLogger(__name__)


class FetchSwingSeries:
    """Use case loading the chart series and the swing timeframe series over the same window."""

    def __init__(
        self,
        market_data_service: MarketDataService,
        timeframe_policy: TimeframePolicy,
    ) -> None:
        self.market_data_service = market_data_service
        self.timeframe_policy = timeframe_policy

    def execute(
        self,
        symbol: str,
        chart_timeframe: Timeframe,
        swing_timeframe: Timeframe,
        end: datetime | None = None,
    ) -> tuple[Sequence[Candle], Sequence[Candle]]:
        chart_tf = self.timeframe_policy.ensure_supported(chart_timeframe)
        swing_tf = self.timeframe_policy.ensure_swing_compatible(
            chart_tf, self.timeframe_policy.ensure_supported(swing_timeframe)
        )

        chart = self.market_data_service.get_ohlcv(symbol=symbol, timeframe=chart_tf, end=end)
        higher = self.market_data_service.get_ohlcv(symbol=symbol, timeframe=swing_tf, end=end)
        logger.debug(
            "Loaded %d %s and %d %s candles for %s", len(chart), chart_tf.value, len(higher), swing_tf.value, symbol
        )
        return chart, higher
