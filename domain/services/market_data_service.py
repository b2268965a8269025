from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence

from domain.entities.candle import Candle
from domain.value_objects.timeframe import Timeframe


class MarketDataService(ABC):
    """Abstract provider of OHLCV bar series."""

    @abstractmethod
    def get_ohlcv(
        self,
        symbol: str,
        timeframe: Timeframe,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int | None = None,
    ) -> Sequence[Candle]:
        """Fetch OHLCV candles for a symbol, oldest first, optionally within a window.

        ``limit`` keeps only the most recent candles.
        """
