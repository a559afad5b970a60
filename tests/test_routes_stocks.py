from datetime import datetime, timedelta, timezone

import httpx
import pytest

from conftest import POLYGON_TEST_KEY, snapshot_body

SNAPSHOT = "/v2/snapshot/locale/us/markets/stocks"

DETAILS = {
    "results": {
        "ticker": "AAPL",
        "name": "Apple Inc.",
        "primary_exchange": "XNAS",
        "market_cap": 2.9e12,
        "description": "Consumer electronics.",
    }
}


@pytest.mark.parametrize("requested", ["AAPL", "aapl", "AaPl"])
def test_quote_symbol_is_uppercased_upstream_ticker(client, fake_polygon, requested):
    fake_polygon.add(f"{SNAPSHOT}/tickers/AAPL", snapshot_body("AAPL"))
    fake_polygon.add("/v3/reference/tickers/AAPL", DETAILS)

    r = client.get(f"/api/quote/{requested}")

    assert r.status_code == 200
    body = r.json()
    assert body["symbol"] == "AAPL"
    assert body["name"] == "Apple Inc."
    assert body["exchange"] == "XNAS"
    assert body["price"] == 191.2
    assert body["open"] == 189.0
    assert body["prevClose"] == 189.7
    assert body["changePercent"] == 0.79
    assert body["marketCap"] == 2.9e12
    assert body["avgVolume"] is None
    assert body["week52High"] is None
    assert body["week52Low"] is None


def test_quote_without_reference_details_uses_defaults(client, fake_polygon):
    fake_polygon.add(f"{SNAPSHOT}/tickers/SPY", snapshot_body("SPY"))

    r = client.get("/api/quote/spy")

    assert r.status_code == 200
    assert r.json()["name"] == "SPY"
    assert r.json()["exchange"] == "NASDAQ"


def test_quote_without_snapshot_is_404(client, fake_polygon):
    fake_polygon.add(f"{SNAPSHOT}/tickers/ZZZZ", {"status": "OK"})
    fake_polygon.add("/v3/reference/tickers/ZZZZ", DETAILS)

    r = client.get("/api/quote/zzzz")

    assert r.status_code == 404
    assert "error" in r.json()


def test_quote_unknown_ticker_is_404(client):
    assert client.get("/api/quote/NOPE").status_code == 404


@pytest.mark.parametrize("symbol", ["ABCDEFGHIJK", "BRK.B", "A-B", "$$"])
def test_quote_rejects_invalid_symbol_without_calling_upstream(client, fake_polygon, symbol):
    r = client.get(f"/api/quote/{symbol}")

    assert r.status_code == 400
    assert r.json() == {"error": "Invalid stock symbol"}
    assert fake_polygon.requests == []


def test_quote_upstream_failure_is_generic_500(client, fake_polygon):
    fake_polygon.add(f"{SNAPSHOT}/tickers/AAPL", {"error": "internal"}, status=500)
    fake_polygon.add("/v3/reference/tickers/AAPL", DETAILS)

    r = client.get("/api/quote/AAPL")

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch quote from Polygon"}
    assert POLYGON_TEST_KEY not in r.text


def test_search_passes_results_through(client, fake_polygon):
    fake_polygon.add(
        "/v3/reference/tickers",
        {"results": [{"ticker": "AAPL", "name": "Apple Inc.", "market": "stocks"}]},
    )

    r = client.get("/api/search/apple")

    assert r.status_code == 200
    assert r.json() == [{"ticker": "AAPL", "name": "Apple Inc.", "market": "stocks"}]


def test_search_upstream_404_is_empty_list(client):
    r = client.get("/api/search/nothing")
    assert r.status_code == 200
    assert r.json() == []


def test_search_blank_query_is_400(client):
    r = client.get("/api/search/%20%20")
    assert r.status_code == 400
    assert r.json() == {"error": "Search query must not be empty"}


def test_search_upstream_failure_is_500(client, fake_polygon):
    fake_polygon.fail("/v3/reference/tickers", httpx.ConnectError("down"))
    r = client.get("/api/search/apple")
    assert r.status_code == 500


def _chart_path(symbol, multiplier, timespan, days):
    today = datetime.now(timezone.utc).date()
    start = today - timedelta(days=days)
    return f"/v2/aggs/ticker/{symbol}/range/{multiplier}/{timespan}/{start}/{today}"


def test_chart_one_month_returns_all_bars_in_order(client, fake_polygon):
    day_ms = 86_400_000
    bars = [
        {"t": 1_757_000_000_000 + i * day_ms, "o": 100 + i, "h": 101 + i, "l": 99 + i, "c": 100.5 + i, "v": 1000 + i}
        for i in range(30)
    ]
    fake_polygon.add(_chart_path("AAPL", 1, "day", 30), {"results": bars})

    r = client.get("/api/chart/aapl", params={"range": "1M"})

    assert r.status_code == 200
    points = r.json()
    assert len(points) == 30
    timestamps = [p["timestamp"] for p in points]
    assert timestamps == sorted(timestamps)
    for point in points:
        for key in ("open", "high", "low", "close", "volume"):
            assert isinstance(point[key], (int, float))
    assert points[0] == {
        "timestamp": bars[0]["t"],
        "open": 100,
        "high": 101,
        "low": 99,
        "close": 100.5,
        "volume": 1000,
    }


def test_chart_unknown_range_uses_one_day_minutes(client, fake_polygon):
    fake_polygon.add(_chart_path("AAPL", 1, "minute", 1), {"results": [{"t": 1, "c": 1}]})

    r = client.get("/api/chart/AAPL", params={"range": "10Y"})

    assert r.status_code == 200
    assert len(r.json()) == 1


def test_chart_range_is_case_insensitive(client, fake_polygon):
    fake_polygon.add(_chart_path("AAPL", 15, "minute", 7), {"results": [{"t": 1}]})
    r = client.get("/api/chart/AAPL", params={"range": "1w"})
    assert r.status_code == 200
    assert fake_polygon.paths() == [_chart_path("AAPL", 15, "minute", 7)]


def test_chart_without_bars_is_empty_list(client, fake_polygon):
    fake_polygon.add(_chart_path("AAPL", 1, "minute", 1), {"status": "OK", "resultsCount": 0})
    r = client.get("/api/chart/AAPL")
    assert r.status_code == 200
    assert r.json() == []


def test_chart_upstream_failure_is_500(client, fake_polygon):
    fake_polygon.add(_chart_path("AAPL", 1, "day", 365), {}, status=503)
    r = client.get("/api/chart/AAPL", params={"range": "1Y"})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch chart data from Polygon"}
