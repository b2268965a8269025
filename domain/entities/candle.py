from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal

from domain.value_objects.timeframe import Timeframe


@dataclass(frozen=True)
class Candle:
    """Represents a closed OHLCV bar belonging to exactly one timeframe series."""

    timeframe: Timeframe
    timestamp: datetime
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal = Decimal("0")
    symbol: str = ""

    @property
    def close_time(self) -> datetime:
        """Time at which the bar stops accepting prices."""
        return self.timestamp + timedelta(seconds=self.timeframe.seconds)
