from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from interfaces.api.routes import create_app

BASE_TIME = datetime(2024, 2, 5)


def zigzag(start: int, up: int, down: int, cycles: int, leg: int = 3) -> list[int]:
    mids = [start]
    for _ in range(cycles):
        for _ in range(leg):
            mids.append(mids[-1] + up)
        for _ in range(leg):
            mids.append(mids[-1] - down)
    return mids


def write_market_data(data_dir, symbol: str, mids: list[int]) -> None:
    hourly = ["datetime,open,high,low,close,volume"]
    quarters = ["datetime,open,high,low,close,volume"]
    for hour, mid in enumerate(mids):
        start = BASE_TIME + timedelta(hours=hour)
        o, h, l, c = mid - 0.5, mid + 1, mid - 1, mid + 0.5
        hourly.append(f"{start.isoformat()},{o},{h},{l},{c},1000")
        for quarter, bar in enumerate([(o, o, o, o), (o, o, l, o), (o, h, o, c), (c, c, c, c)]):
            time = start + timedelta(minutes=15 * quarter)
            quarters.append(f"{time.isoformat()},{bar[0]},{bar[1]},{bar[2]},{bar[3]},250")

    (data_dir / f"{symbol}_1h.csv").write_text("\n".join(hourly) + "\n")
    (data_dir / f"{symbol}_15min.csv").write_text("\n".join(quarters) + "\n")


@pytest.fixture
def client(monkeypatch, tmp_path):
    monkeypatch.setenv("MARKET_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SWING_LOOKBACK_PERIOD", "30")
    monkeypatch.setenv("SWING_TIMEFRAME", "1h")
    monkeypatch.delenv("SWING_PERIOD", raising=False)
    write_market_data(tmp_path, "BTCUSD", zigzag(100, up=3, down=2, cycles=10))
    return TestClient(create_app())


def test_timeframes_endpoint(client):
    response = client.get("/api/timeframes")

    assert response.status_code == 200
    payload = response.json()
    assert payload[0] == {"value": "1min", "seconds": 60}
    assert {"value": "1h", "seconds": 3600} in payload


def test_swing_trend_endpoint(client):
    response = client.get("/api/swing-trend", params={"symbol": "BTC/USD", "timeframe": "15min"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["computed"] is True
    assert payload["swing_timeframe"] == "1h"
    assert payload["trend"] == {"direction": "BULLISH", "status": "MOMENTUM"}
    assert payload["choch"] == "CONTINUATION"
    assert payload["liquidity_sweep"] is False
    assert payload["expansion"] == 11.0
    assert payload["evaluated_at"] == int((BASE_TIME + timedelta(hours=61)).timestamp())

    latest_high = payload["highs"][0]
    assert latest_high["type"] == "HIGH"
    assert latest_high["position"] == "aboveBar"
    assert latest_high["price"] == 137.0
    assert latest_high["time"] - latest_high["htf_time"] == 30 * 60
    assert payload["lows"][0]["position"] == "belowBar"


def test_swing_trend_history_endpoint(client):
    response = client.get(
        "/api/swing-trend/history",
        params={"symbol": "BTC/USD", "timeframe": "15min", "limit": 5},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["symbol"] == "BTC/USD"
    assert payload["timeframe"] == "15min"
    assert len(payload["signals"]) == 5
    assert payload["signals"][-1]["evaluated_at"] == int((BASE_TIME + timedelta(hours=61)).timestamp())


@pytest.mark.parametrize(
    "params",
    [
        {"timeframe": "H1"},
        {"timeframe": "15min", "swing_timeframe": "2days"},
        {"timeframe": "15min", "period": 4},
    ],
)
def test_invalid_request_returns_400(client, params):
    response = client.get("/api/swing-trend", params={"symbol": "BTC/USD", **params})

    assert response.status_code == 400


def test_swing_timeframe_finer_than_chart_returns_422(client):
    response = client.get(
        "/api/swing-trend",
        params={"symbol": "BTC/USD", "timeframe": "4h", "swing_timeframe": "1h"},
    )

    assert response.status_code == 422


def test_missing_market_data_returns_502(client):
    response = client.get("/api/swing-trend", params={"symbol": "ETH/USD", "timeframe": "15min"})

    assert response.status_code == 502
