from __future__ import annotations

from dataclasses import dataclass

from domain.value_objects.timeframe import Timeframe


@dataclass(frozen=True)
class SwingTrendSettings:
    """Configuration for the HTF swing trend indicator."""

    period: int = 5  # fractal width, odd; period // 2 confirmation bars on each side
    lookback: int = 200  # HTF bars scanned and max swings retained per type
    swing_timeframe: Timeframe = Timeframe.ONE_HOUR

    def __post_init__(self) -> None:
        # Raises UnsupportedTimeframeError for anything outside the enumeration.
        object.__setattr__(self, "swing_timeframe", Timeframe.parse(self.swing_timeframe))

        if self.period < 3:
            raise ValueError("period must be at least 3.")
        if self.period % 2 == 0:
            raise ValueError("period must be odd.")
        if self.lookback < 4:
            raise ValueError("lookback must be at least 4.")
