"""
HTF swing trend module.

Swing detection on a higher timeframe with trend, CHoCH and liquidity sweep
classification.
"""

from domain.indicators.swings.bar_index import BarIndexMapper
from domain.indicators.swings.models import (
    ChochResult,
    GateDecision,
    SwingSeries,
    SwingTrendSignal,
)
from domain.indicators.swings.settings import SwingTrendSettings
from domain.indicators.swings.swing_trend_indicator import SwingTrendIndicator
from domain.indicators.swings.trend_classifier import classify_trend

__all__ = [
    "BarIndexMapper",
    "ChochResult",
    "GateDecision",
    "SwingSeries",
    "SwingTrendIndicator",
    "SwingTrendSettings",
    "SwingTrendSignal",
    "classify_trend",
]
