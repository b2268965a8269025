from .timeframe import Timeframe, timeframe_seconds
from .trend import ChochState, Swing, SwingType, TrendDirection, TrendState, TrendStatus

__all__ = [
    "ChochState",
    "Swing",
    "SwingType",
    "Timeframe",
    "TrendDirection",
    "TrendState",
    "TrendStatus",
    "timeframe_seconds",
]
