from pydantic import BaseModel
from typing import List, Optional


class SwingResponse(BaseModel):
    """Swing marker placed on the chart candle that carries the wick."""
    type: str  # 'HIGH' or 'LOW'
    htf_time: int  # Unix timestamp of the HTF bar
    time: int  # Unix timestamp of the chart candle
    price: float  # HTF price used for classification
    display_price: float
    position: str  # 'aboveBar' or 'belowBar'
    shape: str  # 'arrowDown' above highs, 'arrowUp' below lows
    color: str  # hex color
    synthetic: bool = False


class TrendStateResponse(BaseModel):
    direction: str  # 'BULLISH', 'BEARISH', 'UNCLEAR'
    status: str  # 'MOMENTUM', 'COMPRESSION', 'NONE'


class SwingTrendResponse(BaseModel):
    """Swing trend snapshot at one HTF bar close."""
    swing_timeframe: Optional[str] = None
    evaluated_at: Optional[int] = None  # Unix timestamp of the HTF bar close
    computed: bool
    trend: TrendStateResponse
    raw_trend: TrendStateResponse
    previous_trend: TrendStateResponse
    choch: str  # 'CONTINUATION', 'BULLISH', 'BEARISH'
    liquidity_sweep: bool
    expansion: Optional[float] = None
    reason: str
    highs: List[SwingResponse] = []
    lows: List[SwingResponse] = []


class SwingTrendHistoryResponse(BaseModel):
    """Swing trend evaluated at every HTF bar close."""
    symbol: str
    timeframe: str
    signals: List[SwingTrendResponse]
