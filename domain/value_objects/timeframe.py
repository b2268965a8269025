from __future__ import annotations

from enum import Enum

from domain.exceptions.errors import UnsupportedTimeframeError


class Timeframe(str, Enum):
    ONE_MINUTE = "1min"
    TWO_MINUTES = "2min"
    THREE_MINUTES = "3min"
    FOUR_MINUTES = "4min"
    FIVE_MINUTES = "5min"
    TEN_MINUTES = "10min"
    FIFTEEN_MINUTES = "15min"
    TWENTY_MINUTES = "20min"
    THIRTY_MINUTES = "30min"
    FORTY_FIVE_MINUTES = "45min"
    ONE_HOUR = "1h"
    TWO_HOURS = "2h"
    THREE_HOURS = "3h"
    FOUR_HOURS = "4h"
    SIX_HOURS = "6h"
    EIGHT_HOURS = "8h"
    TWELVE_HOURS = "12h"
    ONE_DAY = "1day"
    ONE_WEEK = "1week"
    ONE_MONTH = "1month"

    @classmethod
    def parse(cls, value: "str | Timeframe") -> "Timeframe":
        """Return the timeframe for a raw value, failing on anything outside the enumeration."""
        if isinstance(value, Timeframe):
            return value
        try:
            return cls(str(value).strip())
        except ValueError as exc:
            valid = [tf.value for tf in cls]
            raise UnsupportedTimeframeError(
                f"Unsupported timeframe: {value}. Valid options: {valid}"
            ) from exc

    @property
    def seconds(self) -> int:
        """Duration of one bar in seconds (monthly bars use a 30-day approximation)."""
        return timeframe_seconds(self)


_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR

_TIMEFRAME_SECONDS: dict[Timeframe, int] = {
    Timeframe.ONE_MINUTE: _MINUTE,
    Timeframe.TWO_MINUTES: 2 * _MINUTE,
    Timeframe.THREE_MINUTES: 3 * _MINUTE,
    Timeframe.FOUR_MINUTES: 4 * _MINUTE,
    Timeframe.FIVE_MINUTES: 5 * _MINUTE,
    Timeframe.TEN_MINUTES: 10 * _MINUTE,
    Timeframe.FIFTEEN_MINUTES: 15 * _MINUTE,
    Timeframe.TWENTY_MINUTES: 20 * _MINUTE,
    Timeframe.THIRTY_MINUTES: 30 * _MINUTE,
    Timeframe.FORTY_FIVE_MINUTES: 45 * _MINUTE,
    Timeframe.ONE_HOUR: _HOUR,
    Timeframe.TWO_HOURS: 2 * _HOUR,
    Timeframe.THREE_HOURS: 3 * _HOUR,
    Timeframe.FOUR_HOURS: 4 * _HOUR,
    Timeframe.SIX_HOURS: 6 * _HOUR,
    Timeframe.EIGHT_HOURS: 8 * _HOUR,
    Timeframe.TWELVE_HOURS: 12 * _HOUR,
    Timeframe.ONE_DAY: _DAY,
    Timeframe.ONE_WEEK: 7 * _DAY,
    Timeframe.ONE_MONTH: 30 * _DAY,
}


def timeframe_seconds(timeframe: Timeframe | str) -> int:
    """Map a timeframe to its bar duration in seconds."""
    try:
        return _TIMEFRAME_SECONDS[Timeframe.parse(timeframe)]
    except KeyError as exc:  # pragma: no cover - every member is mapped
        raise UnsupportedTimeframeError(f"Unsupported timeframe: {timeframe}") from exc
