import argparse
from datetime import datetime

from application.policies.timeframe_policy import TimeframePolicy
from application.use_cases.fetch_swing_series import FetchSwingSeries
from domain.exceptions.errors import ConfigurationError, DataProviderError
from domain.indicators.swings import SwingTrendSettings
from domain.value_objects.timeframe import Timeframe
from infrastructure.config.settings import load_settings
from infrastructure.config.swings import load_swing_settings
from infrastructure.data_providers.csv_data_provider import CsvMarketDataProvider
from infrastructure.storage.logging.logger import configure_domain_logging, get_logger
from interfaces.controllers.swing_trend_controller import SwingTrendController
from interfaces.presenters.console_presenter import format_dashboard, format_swings


def build_controller(data_dir: str) -> SwingTrendController:
    timeframe_policy = TimeframePolicy()
    data_provider = CsvMarketDataProvider(data_dir=data_dir)

    fetch_series = FetchSwingSeries(
        market_data_service=data_provider,
        timeframe_policy=timeframe_policy,
    )

    return SwingTrendController(fetch_series=fetch_series)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify the higher timeframe swing trend from CSV candles.")
    parser.add_argument("--symbol", required=True, help="Asset symbol (e.g., AAPL, BTC/USD).")
    parser.add_argument(
        "--timeframe",
        default=Timeframe.FIVE_MINUTES.value,
        help=f"Chart timeframe (options: {[tf.value for tf in Timeframe]}).",
    )
    parser.add_argument("--swing-timeframe", help="Timeframe the swings are read on (default: SWING_TIMEFRAME or 1h).")
    parser.add_argument("--period", type=int, help="Fractal swing period, odd (default: SWING_PERIOD or 5).")
    parser.add_argument("--lookback", type=int, help="HTF bars scanned for swings (default: SWING_LOOKBACK_PERIOD or 200).")
    parser.add_argument("--data-dir", help="Directory holding {SYMBOL}_{timeframe}.csv files.")
    parser.add_argument("--end", help="Ignore candles after this datetime (ISO 8601).")
    parser.add_argument("--history", action="store_true", help="Print the trend at every HTF bar close.")
    parser.add_argument("--show-swings", action="store_true", help="List the detected swings.")
    return parser.parse_args()


def main() -> None:
    settings = load_settings()
    logger = get_logger(__name__, level=settings.log_level)
    configure_domain_logging(settings.log_level)

    args = parse_args()
    defaults = load_swing_settings()
    timeframe = Timeframe.parse(args.timeframe)
    swing_settings = SwingTrendSettings(
        period=args.period or defaults.period,
        lookback=args.lookback or defaults.lookback,
        swing_timeframe=args.swing_timeframe or defaults.swing_timeframe,
    )
    end = datetime.fromisoformat(args.end) if args.end else None

    controller = build_controller(data_dir=args.data_dir or str(settings.data_dir))

    try:
        if args.history:
            for signal in controller.history(args.symbol, timeframe, swing_settings, end=end):
                evaluated = signal.evaluated_at.isoformat() if signal.evaluated_at else "-"
                print(f"{evaluated} {signal.trend} | CHoCH {signal.choch.value} | sweep {signal.liquidity_sweep}")
            return

        signal = controller.analyze(args.symbol, timeframe, swing_settings, end=end)
    except (ConfigurationError, DataProviderError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    print(format_dashboard(signal))
    if args.show_swings:
        print(format_swings(signal))


if __name__ == "__main__":
    main()
