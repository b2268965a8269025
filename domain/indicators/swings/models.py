"""
Value objects for the HTF swing trend indicator.

Contains the swing buffer, the intermediate CHoCH and gate results and the
snapshot published after each update.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from domain.value_objects.timeframe import Timeframe
from domain.value_objects.trend import (
    ChochState,
    Swing,
    SwingType,
    TrendDirection,
    TrendState,
)


@dataclass(frozen=True)
class SwingSeries:
    """
    Swing highs and lows of the lookback window, each ordered most-recent-first.

    Index 0 is the latest swing (HH1/LL1 in chart notation), index 1 the one before, etc.
    """

    highs: tuple[Swing, ...] = ()
    lows: tuple[Swing, ...] = ()

    @classmethod
    def from_chronological(cls, swings: list[Swing], capacity: int) -> "SwingSeries":
        """Split a chronological swing list into per-type sequences, newest first."""
        highs: list[Swing] = []
        lows: list[Swing] = []
        for swing in reversed(swings):
            if swing.is_high and len(highs) < capacity:
                highs.append(swing)
            elif swing.is_low and len(lows) < capacity:
                lows.append(swing)
        return cls(highs=tuple(highs), lows=tuple(lows))

    @property
    def is_empty(self) -> bool:
        return not self.highs and not self.lows

    def has_depth(self, count: int) -> bool:
        """Whether at least ``count`` highs and ``count`` lows are available."""
        return len(self.highs) >= count and len(self.lows) >= count

    def high_prices(self, offset: int = 0, count: int = 3) -> tuple[Decimal, ...]:
        return tuple(s.price for s in self.highs[offset : offset + count])

    def low_prices(self, offset: int = 0, count: int = 3) -> tuple[Decimal, ...]:
        return tuple(s.price for s in self.lows[offset : offset + count])

    def chronological(self) -> list[Swing]:
        """Interleave highs and lows by HTF open time, oldest first."""
        return sorted(
            (*self.highs, *self.lows),
            key=lambda s: (s.htf_open_time, 0 if s.type is SwingType.HIGH else 1),
        )


@dataclass(frozen=True)
class ChochResult:
    """Change of Character reading plus the dual-CHoCH liquidity sweep finding."""

    state: ChochState = ChochState.CONTINUATION
    is_liquidity_sweep: bool = False

    @property
    def is_bullish(self) -> bool:
        return self.state is ChochState.BULLISH

    @property
    def is_bearish(self) -> bool:
        return self.state is ChochState.BEARISH


@dataclass(frozen=True)
class GateDecision:
    """Trend published by the gate and whether it forced the liquidity sweep flag."""

    trend: TrendState
    liquidity_sweep: bool = False


@dataclass(frozen=True)
class SwingTrendSignal:
    """
    Read-only snapshot published after each update of the swing trend indicator.

    ``trend`` is the gated trend; ``raw_trend`` and ``previous_trend`` are the
    classifier outputs it was derived from.
    """

    trend: TrendState
    choch: ChochState = ChochState.CONTINUATION
    liquidity_sweep: bool = False
    highs: tuple[Swing, ...] = ()
    lows: tuple[Swing, ...] = ()
    raw_trend: TrendState = field(default_factory=TrendState.unclear)
    previous_trend: TrendState = field(default_factory=TrendState.unclear)
    swing_timeframe: Timeframe | None = None
    evaluated_at: datetime | None = None
    computed: bool = True
    reason: str = ""

    @classmethod
    def empty(
        cls,
        reason: str,
        swing_timeframe: Timeframe | None = None,
        evaluated_at: datetime | None = None,
        computed: bool = True,
    ) -> "SwingTrendSignal":
        return cls(
            trend=TrendState.unclear(),
            swing_timeframe=swing_timeframe,
            evaluated_at=evaluated_at,
            computed=computed,
            reason=reason,
        )

    @property
    def direction(self) -> TrendDirection:
        return self.trend.direction

    @property
    def expansion(self) -> Decimal | None:
        """Distance between the latest swing high and the latest swing low."""
        if not self.highs or not self.lows:
            return None
        return self.highs[0].price - self.lows[0].price
