from __future__ import annotations

from bisect import bisect_right
from datetime import datetime, timedelta
from typing import Iterator, Sequence

from domain.entities.candle import Candle
from domain.exceptions.errors import BarNotFoundError
from domain.value_objects.timeframe import Timeframe


class BarSeries:
    """Chronological OHLC series of a single timeframe with time lookups."""

    def __init__(self, timeframe: Timeframe, candles: Sequence[Candle]) -> None:
        ordered = sorted(candles, key=lambda c: c.timestamp)

        self.timeframe = timeframe
        self._candles: list[Candle] = ordered
        self._open_times: list[datetime] = [c.timestamp for c in ordered]
        self._index_by_time: dict[datetime, int] = {
            timestamp: idx for idx, timestamp in enumerate(self._open_times)
        }

    def __len__(self) -> int:
        return len(self._candles)

    def __getitem__(self, index: int) -> Candle:
        return self._candles[index]

    def __iter__(self) -> Iterator[Candle]:
        return iter(self._candles)

    def __repr__(self) -> str:
        return f"<BarSeries(timeframe={self.timeframe.value}, bars={len(self)})>"

    @property
    def candles(self) -> list[Candle]:
        return list(self._candles)

    def index_by_time(self, timestamp: datetime) -> int:
        """Return the index of the bar opening exactly at ``timestamp``."""
        try:
            return self._index_by_time[timestamp]
        except KeyError as exc:
            raise BarNotFoundError(
                f"No {self.timeframe.value} bar opens at {timestamp.isoformat()}"
            ) from exc

    def index_containing(self, timestamp: datetime) -> int:
        """Return the index of the bar whose span covers ``timestamp``."""
        position = bisect_right(self._open_times, timestamp) - 1
        if position < 0:
            raise BarNotFoundError(f"{timestamp.isoformat()} precedes the {self.timeframe.value} series")

        span_end = self._open_times[position] + timedelta(seconds=self.timeframe.seconds)
        if timestamp >= span_end:
            raise BarNotFoundError(
                f"No {self.timeframe.value} bar covers {timestamp.isoformat()}"
            )
        return position
