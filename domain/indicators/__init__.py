"""
Indicators module for technical analysis.

This module contains the multi-timeframe indicators used to classify market
structure.
"""

from domain.indicators.base import Indicator
from domain.indicators.swings import (
    BarIndexMapper,
    SwingSeries,
    SwingTrendIndicator,
    SwingTrendSettings,
    SwingTrendSignal,
    classify_trend,
)

__all__ = [
    "BarIndexMapper",
    "Indicator",
    "SwingSeries",
    "SwingTrendIndicator",
    "SwingTrendSettings",
    "SwingTrendSignal",
    "classify_trend",
]
