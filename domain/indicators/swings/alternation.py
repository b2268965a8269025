"""
Swing alternation enforcement.

Guarantees a strict High-Low-High-Low sequence by inserting the missing
opposite swing between two consecutive swings of the same type.
"""

from __future__ import annotations

import logging

from domain.exceptions.errors import BarNotFoundError
from domain.indicators.swings.bar_index import BarIndexMapper
from domain.indicators.swings.models import SwingSeries
from domain.value_objects.trend import Swing, SwingType

logger = logging.getLogger(__name__)


class SwingAlternationEnforcer:
    """Merge swing highs and lows and force strict alternation."""

    def __init__(self, lookback: int = 200) -> None:
        self.lookback = lookback

    def enforce(self, mapper: BarIndexMapper, highs: list[Swing], lows: list[Swing]) -> SwingSeries:
        # Highs before lows on equal time (outside bars carry both).
        merged = sorted(
            [*highs, *lows],
            key=lambda s: (s.htf_open_time, 0 if s.type is SwingType.HIGH else 1),
        )
        if len(merged) < 2:
            return SwingSeries.from_chronological(merged, self.lookback)

        corrected: list[Swing] = [merged[0]]
        for current in merged[1:]:
            previous = corrected[-1]
            if current.type is previous.type:
                missing = self.find_missing_swing(mapper, previous, current)
                if missing is not None:
                    corrected.append(missing)
                    logger.debug(
                        "Inserted swing %s @ %s (%s)",
                        missing.type.value,
                        missing.htf_open_time.isoformat(),
                        missing.price,
                    )
            corrected.append(current)

        return SwingSeries.from_chronological(corrected, self.lookback)

    @staticmethod
    def find_missing_swing(mapper: BarIndexMapper, first: Swing, second: Swing) -> Swing | None:
        """
        Most extreme opposite-type bar strictly between two same-type swings.

        Returns None when the swings are adjacent or either time is not in the HTF series.
        """
        try:
            start = mapper.htf.index_by_time(first.htf_open_time)
            end = mapper.htf.index_by_time(second.htf_open_time)
        except BarNotFoundError:
            return None

        if end - start < 2:
            return None

        missing_type = first.type.opposite
        best = start + 1
        for idx in range(start + 2, end):
            candle = mapper.htf[idx]
            if missing_type is SwingType.HIGH:
                if candle.high > mapper.htf[best].high:
                    best = idx
            elif candle.low < mapper.htf[best].low:
                best = idx

        try:
            return mapper.build_swing(best, missing_type, synthetic=True)
        except BarNotFoundError:
            return None
