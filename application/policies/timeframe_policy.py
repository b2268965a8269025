from __future__ import annotations

from domain.exceptions.errors import ConfigurationError, UnsupportedTimeframeError
from domain.value_objects.timeframe import Timeframe


class TimeframePolicy:
    """Validates whether timeframes are supported and can be combined."""

    def __init__(self, allowed_timeframes: list[Timeframe] | None = None) -> None:
        self.allowed_timeframes = allowed_timeframes or list(Timeframe)

    def ensure_supported(self, timeframe: Timeframe | str) -> Timeframe:
        parsed = Timeframe.parse(timeframe)
        if parsed not in self.allowed_timeframes:
            raise UnsupportedTimeframeError(f"Timeframe {parsed.value} is not supported")
        return parsed

    def ensure_swing_compatible(self, chart: Timeframe, swing: Timeframe) -> Timeframe:
        """Swings must be read on the chart timeframe or a higher one."""
        if swing.seconds < chart.seconds:
            raise ConfigurationError(
                f"Swing timeframe {swing.value} is finer than chart timeframe {chart.value}"
            )
        return swing
