from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from application.policies.timeframe_policy import TimeframePolicy
from application.use_cases.fetch_swing_series import FetchSwingSeries
from domain.exceptions.errors import ConfigurationError, DataProviderError, UnsupportedTimeframeError
from domain.indicators.swings import SwingTrendSettings, SwingTrendSignal
from domain.value_objects.timeframe import Timeframe
from domain.value_objects.trend import Swing, TrendState
from infrastructure.config.settings import load_settings
from infrastructure.config.swings import load_swing_settings
from infrastructure.data_providers.csv_data_provider import CsvMarketDataProvider
from infrastructure.storage.logging.logger import configure_domain_logging, get_logger
from interfaces.controllers.swing_trend_controller import SwingTrendController
from .models import (
    SwingResponse,
    SwingTrendHistoryResponse,
    SwingTrendResponse,
    TrendStateResponse,
)


def _trend_response(trend: TrendState) -> TrendStateResponse:
    return TrendStateResponse(direction=trend.direction.value, status=trend.status.value)


def _swing_response(swing: Swing) -> SwingResponse:
    if swing.is_high:
        position, shape, color = "aboveBar", "arrowDown", "#ef4444"  # red
    else:
        position, shape, color = "belowBar", "arrowUp", "#22c55e"  # green

    return SwingResponse(
        type=swing.type.value,
        htf_time=int(swing.htf_open_time.timestamp()),
        time=int(swing.chart_open_time.timestamp()),
        price=float(swing.price),
        display_price=float(swing.display_price),
        position=position,
        shape=shape,
        color=color,
        synthetic=swing.synthetic,
    )


def to_response(signal: SwingTrendSignal) -> SwingTrendResponse:
    """Convert a swing trend snapshot to its API representation."""
    return SwingTrendResponse(
        swing_timeframe=signal.swing_timeframe.value if signal.swing_timeframe else None,
        evaluated_at=int(signal.evaluated_at.timestamp()) if signal.evaluated_at else None,
        computed=signal.computed,
        trend=_trend_response(signal.trend),
        raw_trend=_trend_response(signal.raw_trend),
        previous_trend=_trend_response(signal.previous_trend),
        choch=signal.choch.value,
        liquidity_sweep=signal.liquidity_sweep,
        expansion=float(signal.expansion) if signal.expansion is not None else None,
        reason=signal.reason,
        highs=[_swing_response(s) for s in signal.highs],
        lows=[_swing_response(s) for s in signal.lows],
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = load_settings()
    logger = get_logger(__name__, level=settings.log_level)
    configure_domain_logging(settings.log_level)
    default_swing_settings = load_swing_settings()

    app = FastAPI(
        title="HTF Swing Trend API",
        description="Higher timeframe swing structure: trend, CHoCH and liquidity sweeps",
        version="1.7.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup dependencies
    timeframe_policy = TimeframePolicy()
    data_provider = CsvMarketDataProvider(data_dir=settings.data_dir)
    fetch_series = FetchSwingSeries(
        market_data_service=data_provider,
        timeframe_policy=timeframe_policy,
    )
    swing_trend_controller = SwingTrendController(fetch_series=fetch_series)

    def resolve_request(
        timeframe: str,
        swing_timeframe: Optional[str],
        period: Optional[int],
        lookback: Optional[int],
    ) -> tuple[Timeframe, SwingTrendSettings]:
        try:
            tf = Timeframe.parse(timeframe)
            swing_settings = SwingTrendSettings(
                period=period or default_swing_settings.period,
                lookback=lookback or default_swing_settings.lookback,
                swing_timeframe=swing_timeframe or default_swing_settings.swing_timeframe,
            )
        except (UnsupportedTimeframeError, ValueError) as e:
            raise HTTPException(status_code=400, detail=str(e))
        return tf, swing_settings

    @app.get("/api/timeframes")
    async def get_timeframes():
        """Return available timeframes with their bar duration."""
        return [{"value": tf.value, "seconds": tf.seconds} for tf in Timeframe]

    @app.get("/api/swing-trend", response_model=SwingTrendResponse)
    async def get_swing_trend(
        symbol: str = Query("BTC/USD", description="Asset symbol"),
        timeframe: str = Query("5min", description="Chart timeframe"),
        swing_timeframe: Optional[str] = Query(None, description="Timeframe the swings are read on"),
        period: Optional[int] = Query(None, ge=3, description="Fractal period (odd)"),
        lookback: Optional[int] = Query(None, ge=4, description="HTF bars scanned for swings"),
    ):
        """
        Return the swing trend at the latest closed HTF bar.

        - trend: gated direction (BULLISH, BEARISH, UNCLEAR) and status
        - choch: Change of Character reading
        - highs/lows: swing markers, most recent first
        """
        tf, swing_settings = resolve_request(timeframe, swing_timeframe, period, lookback)

        try:
            signal = swing_trend_controller.analyze(symbol=symbol, timeframe=tf, settings=swing_settings)
        except ConfigurationError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except DataProviderError as e:
            logger.error("Data provider error in swing trend: %s", str(e))
            raise HTTPException(status_code=502, detail=str(e))

        logger.info(
            "Swing trend for %s (%s on %s): %s, CHoCH %s, sweep %s",
            symbol,
            swing_settings.swing_timeframe.value,
            tf.value,
            signal.trend,
            signal.choch.value,
            signal.liquidity_sweep,
        )
        return to_response(signal)

    @app.get("/api/swing-trend/history", response_model=SwingTrendHistoryResponse)
    async def get_swing_trend_history(
        symbol: str = Query("BTC/USD", description="Asset symbol"),
        timeframe: str = Query("5min", description="Chart timeframe"),
        swing_timeframe: Optional[str] = Query(None, description="Timeframe the swings are read on"),
        period: Optional[int] = Query(None, ge=3, description="Fractal period (odd)"),
        lookback: Optional[int] = Query(None, ge=4, description="HTF bars scanned for swings"),
        limit: int = Query(100, ge=1, le=5000, description="Number of most recent HTF closes to return"),
    ):
        """Return the swing trend evaluated at each HTF bar close, oldest first."""
        tf, swing_settings = resolve_request(timeframe, swing_timeframe, period, lookback)

        try:
            signals = swing_trend_controller.history(symbol=symbol, timeframe=tf, settings=swing_settings)
        except ConfigurationError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except DataProviderError as e:
            logger.error("Data provider error in swing trend history: %s", str(e))
            raise HTTPException(status_code=502, detail=str(e))

        recent: List[SwingTrendSignal] = signals[-limit:]
        return SwingTrendHistoryResponse(
            symbol=symbol,
            timeframe=tf.value,
            signals=[to_response(s) for s in recent],
        )

    logger.info("FastAPI app created successfully")
    return app


app = create_app()
