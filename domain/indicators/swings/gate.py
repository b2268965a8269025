"""
Trend gate: a reversal of the raw trend is only published when a CHoCH in the
new direction confirms it.
"""

from __future__ import annotations

import logging

from domain.indicators.swings.models import ChochResult, GateDecision, SwingSeries
from domain.value_objects.trend import TrendDirection, TrendState, TrendStatus

logger = logging.getLogger(__name__)


class TrendGate:
    """Combine the previous trend, the raw trend and the CHoCH reading into the final trend."""

    def apply(
        self,
        swings: SwingSeries,
        raw: TrendState,
        previous_direction: TrendDirection,
        choch: ChochResult,
    ) -> GateDecision:
        if choch.is_liquidity_sweep:
            logger.debug("Gate: dual CHoCH liquidity sweep, restoring %s", previous_direction.value)
            return GateDecision(
                trend=TrendState(previous_direction, TrendStatus.MOMENTUM),
                liquidity_sweep=True,
            )

        if previous_direction is TrendDirection.BULLISH and raw.is_bearish:
            decision = self._gate_reversal(
                confirmed=choch.is_bearish,
                raw=raw,
                old_direction=TrendDirection.BULLISH,
                structure_holds=len(swings.highs) >= 4 and swings.highs[0].price > swings.highs[3].price,
            )
        elif previous_direction is TrendDirection.BEARISH and raw.is_bullish:
            decision = self._gate_reversal(
                confirmed=choch.is_bullish,
                raw=raw,
                old_direction=TrendDirection.BEARISH,
                structure_holds=len(swings.lows) >= 4 and swings.lows[0].price < swings.lows[3].price,
            )
        else:
            return GateDecision(trend=raw)

        logger.debug(
            "Gate: prev=%s raw=%s choch=%s => %s",
            previous_direction.value,
            raw.direction.value,
            choch.state.value,
            decision.trend,
        )
        return decision

    @staticmethod
    def _gate_reversal(
        confirmed: bool,
        raw: TrendState,
        old_direction: TrendDirection,
        structure_holds: bool,
    ) -> GateDecision:
        if confirmed:
            return GateDecision(trend=raw)
        if structure_holds:
            return GateDecision(trend=TrendState(old_direction, TrendStatus.COMPRESSION))
        return GateDecision(trend=TrendState.unclear())
