from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TrendDirection(str, Enum):
    """Directional classification of the swing structure."""

    BULLISH = "BULLISH"
    BEARISH = "BEARISH"
    UNCLEAR = "UNCLEAR"


class TrendStatus(str, Enum):
    """Whether both legs (MOMENTUM) or only one leg (COMPRESSION) confirm the trend."""

    MOMENTUM = "MOMENTUM"
    COMPRESSION = "COMPRESSION"
    NONE = "NONE"


class ChochState(str, Enum):
    """Change of Character reading for the latest swings."""

    CONTINUATION = "CONTINUATION"
    BULLISH = "BULLISH"
    BEARISH = "BEARISH"


class SwingType(str, Enum):
    """Type of swing pivot."""

    HIGH = "HIGH"
    LOW = "LOW"

    @property
    def opposite(self) -> "SwingType":
        return SwingType.LOW if self is SwingType.HIGH else SwingType.HIGH


@dataclass(frozen=True)
class Swing:
    """
    A swing point detected on the higher timeframe.

    ``price`` is the HTF extreme used for every comparison, ``display_price`` is the
    extreme of the chart candle that carries the wick and is only used for placement.
    """

    htf_open_time: datetime
    chart_open_time: datetime
    price: Decimal
    display_price: Decimal
    bar_index: int
    type: SwingType
    synthetic: bool = False

    @property
    def is_high(self) -> bool:
        return self.type is SwingType.HIGH

    @property
    def is_low(self) -> bool:
        return self.type is SwingType.LOW


@dataclass(frozen=True)
class TrendState:
    """Direction and status of the swing trend."""

    direction: TrendDirection
    status: TrendStatus

    @classmethod
    def unclear(cls) -> "TrendState":
        return cls(direction=TrendDirection.UNCLEAR, status=TrendStatus.NONE)

    @property
    def is_bullish(self) -> bool:
        return self.direction is TrendDirection.BULLISH

    @property
    def is_bearish(self) -> bool:
        return self.direction is TrendDirection.BEARISH

    @property
    def is_unclear(self) -> bool:
        return self.direction is TrendDirection.UNCLEAR

    def __str__(self) -> str:
        if self.is_unclear:
            return self.direction.value
        return f"{self.direction.value} {self.status.value.title()}"
