from datetime import datetime, timedelta
from decimal import Decimal

from domain.entities.bar_series import BarSeries
from domain.entities.candle import Candle
from domain.indicators.swings import BarIndexMapper, SwingSeries
from domain.indicators.swings.choch import ChochDetector
from domain.indicators.swings.gate import TrendGate
from domain.indicators.swings.trend_classifier import classify_trend
from domain.value_objects.timeframe import Timeframe
from domain.value_objects.trend import (
    ChochState,
    Swing,
    SwingType,
    TrendDirection,
    TrendState,
    TrendStatus,
)

BASE_TIME = datetime(2024, 6, 3)


def build_structure(
    highs: list,
    lows: list,
    high_close=None,
    low_close=None,
    latest: SwingType = SwingType.HIGH,
    drop_latest_high_bar: bool = False,
) -> tuple[SwingSeries, BarIndexMapper]:
    """
    Swing buffer (prices most recent first) plus a 1h series holding one candle per swing.

    ``high_close``/``low_close`` set the close of the HH1/LL1 candles.
    """
    high_age = 0 if latest is SwingType.HIGH else 1
    candles: list[Candle] = []

    def add(swing_type: SwingType, prices: list, first_age: int, close) -> tuple[Swing, ...]:
        swings = []
        for i, price in enumerate(prices):
            time = BASE_TIME - timedelta(hours=2 * i + first_age)
            price = Decimal(str(price))
            candle_close = Decimal(str(close)) if (i == 0 and close is not None) else price
            swings.append(
                Swing(
                    htf_open_time=time,
                    chart_open_time=time,
                    price=price,
                    display_price=price,
                    bar_index=100 - 2 * i - first_age,
                    type=swing_type,
                )
            )
            if not (drop_latest_high_bar and swing_type is SwingType.HIGH and i == 0):
                candles.append(
                    Candle(
                        timeframe=Timeframe.ONE_HOUR,
                        timestamp=time,
                        open=price,
                        high=price,
                        low=price,
                        close=candle_close,
                    )
                )
        return tuple(swings)

    high_swings = add(SwingType.HIGH, highs, high_age, high_close)
    low_swings = add(SwingType.LOW, lows, 1 - high_age, low_close)

    series = BarSeries(Timeframe.ONE_HOUR, sorted(candles, key=lambda c: c.timestamp))
    return SwingSeries(highs=high_swings, lows=low_swings), BarIndexMapper(chart=series, htf=series)


def test_bullish_choch_from_declining_highs():
    swings, mapper = build_structure(highs=[110, 100, 105], lows=[95, 92, 94], high_close=108)

    result = ChochDetector().detect(swings, mapper, TrendDirection.UNCLEAR, has_previous_trend=False)

    assert result.state is ChochState.BULLISH
    assert not result.is_liquidity_sweep


def test_break_without_close_beyond_level_is_continuation():
    swings, mapper = build_structure(highs=[110, 100, 105], lows=[95, 92, 94], high_close=99)

    result = ChochDetector().detect(swings, mapper, TrendDirection.UNCLEAR, has_previous_trend=False)

    assert result.state is ChochState.CONTINUATION


def test_missing_htf_candle_never_confirms_a_break():
    swings, mapper = build_structure(highs=[110, 100, 105], lows=[95, 92, 94], drop_latest_high_bar=True)

    result = ChochDetector().detect(swings, mapper, TrendDirection.UNCLEAR, has_previous_trend=False)

    assert result.state is ChochState.CONTINUATION


def test_bullish_choch_against_previous_bearish_trend():
    swings, mapper = build_structure(highs=[110, 100, 95], lows=[95, 92, 94], high_close=108)
    detector = ChochDetector()

    assert detector.detect(swings, mapper, TrendDirection.BEARISH, True).state is ChochState.BULLISH
    assert detector.detect(swings, mapper, TrendDirection.UNCLEAR, True).state is ChochState.BULLISH
    assert detector.detect(swings, mapper, TrendDirection.BULLISH, True).state is ChochState.CONTINUATION
    # Without a previous trend the highs must have been declining.
    assert detector.detect(swings, mapper, TrendDirection.BEARISH, False).state is ChochState.CONTINUATION


def test_bearish_choch_from_rising_lows():
    swings, mapper = build_structure(highs=[100, 104, 102], lows=[88, 92, 90], low_close=89)

    result = ChochDetector().detect(swings, mapper, TrendDirection.UNCLEAR, has_previous_trend=False)

    assert result.state is ChochState.BEARISH


def test_dual_choch_most_recent_break_wins():
    detector = ChochDetector()

    high_last, mapper = build_structure(
        highs=[110, 100, 105], lows=[88, 92, 90], high_close=108, low_close=89, latest=SwingType.HIGH
    )
    low_last, low_mapper = build_structure(
        highs=[110, 100, 105], lows=[88, 92, 90], high_close=108, low_close=89, latest=SwingType.LOW
    )

    resumed = detector.detect(high_last, mapper, TrendDirection.BULLISH, has_previous_trend=True)
    assert resumed.state is ChochState.BULLISH
    assert resumed.is_liquidity_sweep

    reversed_ = detector.detect(low_last, low_mapper, TrendDirection.BULLISH, has_previous_trend=True)
    assert reversed_.state is ChochState.BEARISH
    assert not reversed_.is_liquidity_sweep

    resumed_bearish = detector.detect(low_last, low_mapper, TrendDirection.BEARISH, has_previous_trend=True)
    assert resumed_bearish.state is ChochState.BEARISH
    assert resumed_bearish.is_liquidity_sweep


def test_dual_choch_without_previous_trend_is_not_a_sweep():
    swings, mapper = build_structure(
        highs=[110, 100, 105], lows=[88, 92, 90], high_close=108, low_close=89
    )

    result = ChochDetector().detect(swings, mapper, TrendDirection.UNCLEAR, has_previous_trend=False)

    assert result.state is ChochState.BULLISH
    assert not result.is_liquidity_sweep


def test_dual_choch_sweep_restores_previous_trend_through_gate():
    swings, mapper = build_structure(
        highs=[110, 100, 105], lows=[88, 92, 90], high_close=108, low_close=89, latest=SwingType.HIGH
    )
    raw = classify_trend(swings)

    choch = ChochDetector().detect(swings, mapper, TrendDirection.BULLISH, has_previous_trend=True)
    decision = TrendGate().apply(swings, raw, TrendDirection.BULLISH, choch)

    assert decision.trend == TrendState(TrendDirection.BULLISH, TrendStatus.MOMENTUM)
    assert decision.liquidity_sweep


def test_choch_needs_three_highs_and_lows():
    swings, mapper = build_structure(highs=[110, 100], lows=[95, 92, 94], high_close=108)

    result = ChochDetector().detect(swings, mapper, TrendDirection.BEARISH, has_previous_trend=True)

    assert result.state is ChochState.CONTINUATION
    assert not result.is_liquidity_sweep
