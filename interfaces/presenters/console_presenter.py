from __future__ import annotations

from domain.indicators.swings import SwingTrendSignal
from domain.value_objects.trend import ChochState, Swing


def format_dashboard(signal: SwingTrendSignal) -> str:
    """Return the trend dashboard as a human readable block."""
    timeframe = signal.swing_timeframe.value if signal.swing_timeframe else "n/a"
    lines = [f"Time frame of the swings: {timeframe}"]

    if not signal.computed:
        lines.append(f"Nothing computed: {signal.reason}")
        return "\n".join(lines)

    lines.append(f"Trend: {signal.trend}")

    if signal.choch is ChochState.BULLISH:
        lines.append("CHoCH Bullish")
    elif signal.choch is ChochState.BEARISH:
        lines.append("CHoCH Bearish")
    else:
        lines.append("Continuation")

    lines.append("Liquidity sweep detected" if signal.liquidity_sweep else "No liquidity sweep")

    if signal.expansion is not None:
        lines.append(f"Swing expansion: {signal.expansion}")
    return "\n".join(lines)


def format_swings(signal: SwingTrendSignal) -> str:
    """Return the swings of a signal, oldest first, one per line."""
    swings: list[Swing] = sorted(
        [*signal.highs, *signal.lows], key=lambda s: (s.htf_open_time, s.type.value)
    )
    lines: list[str] = []
    for swing in swings:
        marker = " (inserted)" if swing.synthetic else ""
        lines.append(
            f"{swing.type.value:<4} @ {swing.htf_open_time.isoformat()} price:{swing.price} "
            f"chart:{swing.chart_open_time.isoformat()} display:{swing.display_price}{marker}"
        )
    return "\n".join(lines)
