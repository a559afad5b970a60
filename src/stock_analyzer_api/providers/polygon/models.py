"""Models for the Polygon provider (API params and chart range windows)."""
from datetime import date, timedelta

from pydantic import BaseModel


class PolygonAggregatesParams(BaseModel):
    """Params for /v2/aggs/ticker/{symbol}/range/... (get_aggregates)."""

    adjusted: str = "true"
    sort: str = "asc"


class PolygonSearchParams(BaseModel):
    """Params for /v3/reference/tickers (search_tickers). Merge with 'search' at call site."""

    active: str = "true"
    limit: int = 10


class PolygonMostActiveParams(BaseModel):
    """Params for /v2/snapshot/locale/us/markets/stocks/tickers (get_most_active)."""

    sort: str = "volume"
    order: str = "desc"
    limit: int = 100


class PolygonNewsParams(BaseModel):
    """Params for /v2/reference/news (get_news)."""

    limit: int = 5
    order: str = "desc"
    ticker: str | None = None


class ChartRange(BaseModel):
    """Bar size and lookback for one dashboard chart range."""

    multiplier: int
    timespan: str
    lookback_days: int


DEFAULT_CHART_RANGE = "1D"

CHART_RANGES: dict[str, ChartRange] = {
    "1D": ChartRange(multiplier=1, timespan="minute", lookback_days=1),
    "1W": ChartRange(multiplier=15, timespan="minute", lookback_days=7),
    "1M": ChartRange(multiplier=1, timespan="day", lookback_days=30),
    "6M": ChartRange(multiplier=1, timespan="day", lookback_days=180),
    "1Y": ChartRange(multiplier=1, timespan="day", lookback_days=365),
    "ALL": ChartRange(multiplier=1, timespan="day", lookback_days=1825),
}


def resolve_chart_range(range_name: str | None) -> ChartRange:
    """Case-insensitive lookup; unknown or missing ranges fall back to 1D."""
    key = (range_name or DEFAULT_CHART_RANGE).strip().upper()
    return CHART_RANGES.get(key, CHART_RANGES[DEFAULT_CHART_RANGE])


def chart_window(range_name: str | None, today: date) -> tuple[ChartRange, date, date]:
    """Return (range, from_date, to_date) for a chart request made on `today`."""
    chart_range = resolve_chart_range(range_name)
    return chart_range, today - timedelta(days=chart_range.lookback_days), today
