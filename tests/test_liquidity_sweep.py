from datetime import datetime, timedelta
from decimal import Decimal

from domain.entities.bar_series import BarSeries
from domain.entities.candle import Candle
from domain.indicators.swings import BarIndexMapper, SwingSeries
from domain.indicators.swings.liquidity_sweep import LiquiditySweepDetector
from domain.value_objects.timeframe import Timeframe
from domain.value_objects.trend import Swing, SwingType, TrendDirection

BASE_TIME = datetime(2024, 8, 5)


def build_structure(highs: list, lows: list, high_close=None, low_close=None) -> tuple[SwingSeries, BarIndexMapper]:
    """Swing buffer (prices most recent first) and a 4h series with one candle per swing."""
    candles: list[Candle] = []

    def add(swing_type: SwingType, prices: list, first_age: int, close) -> tuple[Swing, ...]:
        swings = []
        for i, price in enumerate(prices):
            time = BASE_TIME - timedelta(hours=4 * (2 * i + first_age))
            price = Decimal(str(price))
            swings.append(Swing(time, time, price, price, 50 - 2 * i - first_age, swing_type))
            candles.append(
                Candle(
                    timeframe=Timeframe.FOUR_HOURS,
                    timestamp=time,
                    open=price,
                    high=price,
                    low=price,
                    close=Decimal(str(close)) if (i == 0 and close is not None) else price,
                )
            )
        return tuple(swings)

    high_swings = add(SwingType.HIGH, highs, 0, high_close)
    low_swings = add(SwingType.LOW, lows, 1, low_close)
    series = BarSeries(Timeframe.FOUR_HOURS, sorted(candles, key=lambda c: c.timestamp))
    return SwingSeries(highs=high_swings, lows=low_swings), BarIndexMapper(chart=series, htf=series)


def test_bullish_sweep_below_prior_low_then_higher_high():
    swings, mapper = build_structure(highs=[110, 105, 108], lows=[95, 88, 90])

    assert LiquiditySweepDetector().detect(swings, mapper, TrendDirection.BULLISH)


def test_bullish_sweep_needs_reversal_confirmation():
    swings, mapper = build_structure(highs=[100, 105, 108], lows=[95, 88, 90])

    assert not LiquiditySweepDetector().detect(swings, mapper, TrendDirection.BULLISH)


def test_new_low_rejected_by_close_is_bullish_sweep():
    swept, mapper = build_structure(highs=[100, 105, 108], lows=[85, 88, 86], low_close=89)
    held, held_mapper = build_structure(highs=[100, 105, 108], lows=[85, 88, 86], low_close=87)

    assert LiquiditySweepDetector().detect(swept, mapper, TrendDirection.BULLISH)
    assert not LiquiditySweepDetector().detect(held, held_mapper, TrendDirection.BULLISH)


def test_new_low_with_higher_high_is_bullish_sweep():
    swings, mapper = build_structure(highs=[110, 105, 108], lows=[85, 88, 86], low_close=84)

    assert LiquiditySweepDetector().detect(swings, mapper, TrendDirection.BULLISH)


def test_bearish_sweep_above_prior_high_then_lower_low():
    swings, mapper = build_structure(highs=[100, 106, 104], lows=[85, 88, 86])

    assert LiquiditySweepDetector().detect(swings, mapper, TrendDirection.BEARISH)


def test_new_high_rejected_by_close_is_bearish_sweep():
    swept, mapper = build_structure(highs=[110, 106, 108], lows=[90, 88, 86], high_close=104)
    held, held_mapper = build_structure(highs=[110, 106, 108], lows=[90, 88, 86], high_close=109)

    assert LiquiditySweepDetector().detect(swept, mapper, TrendDirection.BEARISH)
    assert not LiquiditySweepDetector().detect(held, held_mapper, TrendDirection.BEARISH)


def test_unclear_trend_never_flags_a_sweep():
    swings, mapper = build_structure(highs=[110, 105, 108], lows=[95, 88, 90])

    assert not LiquiditySweepDetector().detect(swings, mapper, TrendDirection.UNCLEAR)


def test_sweep_needs_three_highs_and_lows():
    swings, mapper = build_structure(highs=[110, 105], lows=[95, 88, 90])

    assert not LiquiditySweepDetector().detect(swings, mapper, TrendDirection.BULLISH)
