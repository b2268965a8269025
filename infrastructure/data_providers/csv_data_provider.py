from __future__ import annotations

import csv
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, Sequence

from domain.entities.candle import Candle
from domain.exceptions.errors import DataProviderError
from domain.services.market_data_service import MarketDataService
from domain.value_objects.timeframe import Timeframe


class CsvMarketDataProvider(MarketDataService):
    """
    Data provider reading one CSV file per symbol and timeframe.

    Files live at ``{data_dir}/{SYMBOL}_{timeframe}.csv`` (``/`` removed from the
    symbol) with a ``datetime,open,high,low,close[,volume]`` header.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, symbol: str, timeframe: Timeframe) -> Path:
        normalized = symbol.strip().upper().replace("/", "")
        return self.data_dir / f"{normalized}_{timeframe.value}.csv"

    def get_ohlcv(
        self,
        symbol: str,
        timeframe: Timeframe,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int | None = None,
    ) -> Sequence[Candle]:
        path = self.path_for(symbol, timeframe)
        if not path.exists():
            raise DataProviderError(f"No {timeframe.value} data for {symbol}: {path} not found")

        with path.open(newline="") as handle:
            rows = list(csv.DictReader(handle))

        candles = sorted(
            (self._build_candle(symbol, timeframe, row) for row in rows),
            key=lambda c: c.timestamp,
        )
        if start:
            candles = [c for c in candles if c.timestamp >= start]
        if end:
            candles = [c for c in candles if c.timestamp <= end]
        if limit:
            candles = candles[-limit:]
        return candles

    def _build_candle(self, symbol: str, timeframe: Timeframe, entry: Dict[str, Any]) -> Candle:
        try:
            timestamp = datetime.fromisoformat(entry["datetime"])
            open_price = Decimal(entry["open"])
            high = Decimal(entry["high"])
            low = Decimal(entry["low"])
            close = Decimal(entry["close"])
            volume = Decimal(entry.get("volume") or "0")
        except (KeyError, ValueError, TypeError, InvalidOperation) as exc:
            raise DataProviderError(f"Invalid candle entry in {timeframe.value} data for {symbol}: {entry}") from exc

        return Candle(
            symbol=symbol,
            timeframe=timeframe,
            timestamp=timestamp,
            open=open_price,
            high=high,
            low=low,
            close=close,
            volume=volume,
        )
