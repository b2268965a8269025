"""
Bar index mapping between the chart timeframe and the swing (higher) timeframe.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from domain.entities.bar_series import BarSeries
from domain.exceptions.errors import BarNotFoundError
from domain.value_objects.trend import Swing, SwingType


class BarIndexMapper:
    """
    Translate indices between the chart (base) series and the HTF series.

    One HTF bar spans ``ratio`` chart candles; the chart candle carrying the
    HTF extreme is used to place the swing on the chart.
    """

    def __init__(self, chart: BarSeries, htf: BarSeries) -> None:
        self.chart = chart
        self.htf = htf
        self.ratio = max(htf.timeframe.seconds // chart.timeframe.seconds, 1)

    def htf_index(self, chart_time: datetime) -> int:
        """HTF bar index covering a chart bar time."""
        return self.htf.index_containing(chart_time)

    def chart_start_index(self, htf_index: int) -> int:
        """Chart index of the candle opening together with the HTF bar."""
        return self.chart.index_by_time(self.htf[htf_index].timestamp)

    def display_index(self, start_index: int, swing_type: SwingType) -> int:
        """
        Chart index of the candle carrying the most extreme price within an HTF bar.

        Scans exactly ``ratio`` candles from ``start_index`` (clipped to the series end);
        the first candle wins on ties.
        """
        best = start_index
        end = min(start_index + self.ratio, len(self.chart))
        for idx in range(start_index, end):
            candle = self.chart[idx]
            if swing_type is SwingType.HIGH:
                if candle.high > self.chart[best].high:
                    best = idx
            elif candle.low < self.chart[best].low:
                best = idx
        return best

    def build_swing(self, htf_index: int, swing_type: SwingType, synthetic: bool = False) -> Swing:
        """
        Create a swing for an HTF bar, resolved to its display candle.

        Raises:
            BarNotFoundError: if the HTF bar has no chart candle opening at the same time.
        """
        htf_candle = self.htf[htf_index]
        start_index = self.chart_start_index(htf_index)
        display = self.chart[self.display_index(start_index, swing_type)]

        if swing_type is SwingType.HIGH:
            price, display_price = htf_candle.high, display.high
        else:
            price, display_price = htf_candle.low, display.low

        return Swing(
            htf_open_time=htf_candle.timestamp,
            chart_open_time=display.timestamp,
            price=price,
            display_price=display_price,
            bar_index=htf_index,
            type=swing_type,
            synthetic=synthetic,
        )

    def htf_close(self, swing: Swing) -> Decimal | None:
        """Close of the HTF candle that formed ``swing``, or None if it is not in the series."""
        try:
            return self.htf[self.htf.index_by_time(swing.htf_open_time)].close
        except BarNotFoundError:
            return None
