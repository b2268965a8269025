"""
HTF Swing Trend indicator.

Detects swing highs and lows on a higher timeframe and derives the trend
direction and status, the Change of Character (CHoCH) and liquidity sweeps
from that structure. Each HTF bar close triggers a full recomputation over the
lookback window:

    fractal swings -> alternation -> previous/raw trend -> CHoCH -> gate -> sweep
"""

from __future__ import annotations

import logging

from domain.entities.bar_series import BarSeries
from domain.exceptions.errors import BarNotFoundError, ConfigurationError
from domain.indicators.base import Indicator
from domain.indicators.swings.alternation import SwingAlternationEnforcer
from domain.indicators.swings.bar_index import BarIndexMapper
from domain.indicators.swings.choch import ChochDetector
from domain.indicators.swings.fractals import FractalSwingDetector
from domain.indicators.swings.gate import TrendGate
from domain.indicators.swings.liquidity_sweep import LiquiditySweepDetector
from domain.indicators.swings.models import SwingSeries, SwingTrendSignal
from domain.indicators.swings.settings import SwingTrendSettings
from domain.indicators.swings.trend_classifier import classify_trend
from domain.value_objects.trend import ChochState, TrendState

logger = logging.getLogger(__name__)


class SwingTrendIndicator(Indicator[SwingTrendSignal]):
    """
    Swing structure indicator for a higher timeframe.

    Identifies:
    - Fractal swing highs/lows, confirmed by closed bars on both sides
    - Trend BULLISH / BEARISH / UNCLEAR with Momentum or Compression status
    - CHoCH, required to accept a reversal of the previous trend
    - Liquidity sweeps (stop hunts beyond a prior swing)
    """

    def __init__(self, settings: SwingTrendSettings | None = None) -> None:
        self._settings = settings or SwingTrendSettings()
        self._fractals = FractalSwingDetector(period=self._settings.period, lookback=self._settings.lookback)
        self._alternation = SwingAlternationEnforcer(lookback=self._settings.lookback)
        self._choch = ChochDetector()
        self._gate = TrendGate()
        self._sweeps = LiquiditySweepDetector()
        self._swings = SwingSeries()
        self._misconfiguration_reported = False

    @property
    def name(self) -> str:
        return "SwingTrendIndicator"

    @property
    def settings(self) -> SwingTrendSettings:
        return self._settings

    @property
    def swings(self) -> SwingSeries:
        """Swing buffer of the last update."""
        return self._swings

    def reset(self) -> None:
        """Reset the indicator state."""
        self._swings = SwingSeries()
        self._misconfiguration_reported = False

    def analyze(self, chart: BarSeries, higher: BarSeries) -> SwingTrendSignal:
        """
        Evaluate the swing structure at the latest closed HTF bar.

        Args:
            chart: Chart timeframe candles, oldest first.
            higher: Candles of ``settings.swing_timeframe``, oldest first.

        Returns:
            SwingTrendSignal snapshot; an empty signal when nothing can be computed.
        """
        mapper = self._build_mapper(chart, higher)
        if mapper is None:
            return self._not_computed()

        current = self.latest_closed_index(mapper)
        if current is None:
            return SwingTrendSignal.empty(
                reason="No closed HTF bar yet.",
                swing_timeframe=self._settings.swing_timeframe,
            )
        return self.update(mapper, current)

    def replay(self, chart: BarSeries, higher: BarSeries) -> list[SwingTrendSignal]:
        """Evaluate every HTF bar close in turn, as a live chart would."""
        mapper = self._build_mapper(chart, higher)
        if mapper is None:
            return []

        current = self.latest_closed_index(mapper)
        if current is None:
            return []

        return [self.update(mapper, idx) for idx in range(self._settings.lookback, current + 1)]

    def update(self, mapper: BarIndexMapper, htf_index: int) -> SwingTrendSignal:
        """Run the full pipeline for the close of HTF bar ``htf_index``."""
        evaluated_at = mapper.htf[htf_index].close_time
        highs, lows = self._fractals.detect(mapper, htf_index)

        if not highs and not lows:
            self._swings = SwingSeries()
            return SwingTrendSignal.empty(
                reason=self._build_reason(TrendState.unclear(), ChochState.CONTINUATION, False, self._swings),
                swing_timeframe=self._settings.swing_timeframe,
                evaluated_at=evaluated_at,
            )

        swings = self._alternation.enforce(mapper, highs, lows)
        self._swings = swings

        previous = classify_trend(swings, offset=1)
        has_previous_trend = swings.has_depth(4)
        raw = classify_trend(swings, offset=0)

        choch = self._choch.detect(swings, mapper, previous.direction, has_previous_trend)
        decision = self._gate.apply(swings, raw, previous.direction, choch)
        liquidity_sweep = decision.liquidity_sweep or self._sweeps.detect(
            swings, mapper, decision.trend.direction
        )

        logger.debug(
            "HTF bar %s: trend=%s (raw=%s, previous=%s) choch=%s sweep=%s",
            mapper.htf[htf_index].timestamp.isoformat(),
            decision.trend,
            raw,
            previous,
            choch.state.value,
            liquidity_sweep,
        )

        return SwingTrendSignal(
            trend=decision.trend,
            choch=choch.state,
            liquidity_sweep=liquidity_sweep,
            highs=swings.highs,
            lows=swings.lows,
            raw_trend=raw,
            previous_trend=previous,
            swing_timeframe=self._settings.swing_timeframe,
            evaluated_at=evaluated_at,
            reason=self._build_reason(decision.trend, choch.state, liquidity_sweep, swings),
        )

    @staticmethod
    def latest_closed_index(mapper: BarIndexMapper) -> int | None:
        """Index of the last HTF bar that closed within the chart series."""
        if not len(mapper.chart) or not len(mapper.htf):
            return None

        last = mapper.chart[len(mapper.chart) - 1]
        try:
            idx = mapper.htf_index(last.timestamp)
        except BarNotFoundError:
            # Chart runs past the HTF series or into a gap in it.
            for idx in range(len(mapper.htf) - 1, -1, -1):
                if mapper.htf[idx].close_time <= last.close_time:
                    return idx
            return None

        if mapper.htf[idx].close_time <= last.close_time:
            return idx
        return idx - 1 if idx > 0 else None

    def _build_mapper(self, chart: BarSeries, higher: BarSeries) -> BarIndexMapper | None:
        if higher.timeframe is not self._settings.swing_timeframe:
            raise ConfigurationError(
                f"Higher timeframe series is {higher.timeframe.value}, "
                f"expected {self._settings.swing_timeframe.value}"
            )

        if chart.timeframe.seconds > self._settings.swing_timeframe.seconds:
            if not self._misconfiguration_reported:
                logger.warning(
                    "Swing timeframe %s is finer than chart timeframe %s; nothing will be computed",
                    self._settings.swing_timeframe.value,
                    chart.timeframe.value,
                )
                self._misconfiguration_reported = True
            return None

        return BarIndexMapper(chart=chart, htf=higher)

    def _not_computed(self) -> SwingTrendSignal:
        return SwingTrendSignal.empty(
            reason="Swing timeframe is finer than the chart timeframe.",
            swing_timeframe=self._settings.swing_timeframe,
            computed=False,
        )

    @staticmethod
    def _build_reason(trend: TrendState, choch: ChochState, liquidity_sweep: bool, swings: SwingSeries) -> str:
        """Build a human-readable reason for the trend determination."""
        if swings.is_empty:
            return "No swings detected yet."

        if not swings.has_depth(3):
            return f"Only {len(swings.highs)} highs and {len(swings.lows)} lows detected; waiting for more swings."

        reasons = [f"Trend {trend}"]
        if choch is ChochState.BULLISH:
            reasons.append("CHoCH bullish: HH1 broke and closed above HH2")
        elif choch is ChochState.BEARISH:
            reasons.append("CHoCH bearish: LL1 broke and closed below LL2")
        if liquidity_sweep:
            reasons.append("Liquidity sweep detected")
        return ". ".join(reasons) + "."
