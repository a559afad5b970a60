"""Mapping from Polygon API responses to dashboard schemas."""
from typing import Any

from stock_analyzer_api.providers.core.utils import (dig, first_nonzero,
                                                   first_present)
from stock_analyzer_api.schemas import (ChartPoint, MarketState, MarketStatus,
                                        MoverEntry, Quote, TickerSearchResult)

DEFAULT_EXCHANGE = "NASDAQ"
UNKNOWN_SOURCE = "Unknown"


def _bar_field(snapshot: dict[str, Any], field: str) -> float:
    """Daily bar value, then minute bar value, then 0. Zeros fall through."""
    return first_nonzero(
        dig(snapshot, "day", field),
        dig(snapshot, "min", field),
        default=0,
    )


def snapshot_to_quote(
    snapshot: dict[str, Any],
    details: dict[str, Any] | None,
    symbol: str,
) -> Quote:
    """Combine a ticker snapshot and (optional) reference details into a Quote.

    Args:
        snapshot: The `ticker` object from the snapshot endpoint.
        details: The `results` object from ticker reference data, if available.
        symbol: Requested symbol, used when upstream omits the ticker.

    Returns:
        Quote with every numeric field present (0 or None when unknown).
    """
    details = details or {}
    ticker = str(snapshot.get("ticker") or symbol).upper()
    return Quote(
        symbol=ticker,
        name=first_present(details.get("name"), default=ticker),
        exchange=first_present(details.get("primary_exchange"), default=DEFAULT_EXCHANGE),
        price=float(_bar_field(snapshot, "c")),
        volume=_bar_field(snapshot, "v"),
        change=first_present(snapshot.get("todaysChange"), default=0),
        change_percent=first_present(snapshot.get("todaysChangePerc"), default=0),
        open=_bar_field(snapshot, "o"),
        prev_close=first_present(dig(snapshot, "prevDay", "c"), default=0),
        high=_bar_field(snapshot, "h"),
        low=_bar_field(snapshot, "l"),
        avg_volume=details.get("average_volume"),
        market_cap=details.get("market_cap"),
        week_52_high=details.get("week_52_high"),
        week_52_low=details.get("week_52_low"),
        description=details.get("description"),
    )


def bar_to_chart_point(bar: dict[str, Any]) -> ChartPoint:
    """Convert one aggregate bar ({t, o, h, l, c, v}) to a ChartPoint."""
    return ChartPoint(
        timestamp=int(first_present(bar.get("t"), default=0)),
        open=first_present(bar.get("o"), default=0),
        high=first_present(bar.get("h"), default=0),
        low=first_present(bar.get("l"), default=0),
        close=first_present(bar.get("c"), default=0),
        volume=first_present(bar.get("v"), default=0),
    )


def snapshot_to_mover(snapshot: dict[str, Any]) -> MoverEntry:
    """Convert a mover snapshot to a MoverEntry (name is the ticker)."""
    symbol = snapshot.get("ticker") or ""
    return MoverEntry(
        symbol=symbol,
        name=symbol,
        price=first_present(
            dig(snapshot, "lastTrade", "p"),
            dig(snapshot, "day", "c"),
            default=0,
        ),
        change_percent=first_present(snapshot.get("todaysChangePerc"), default=0),
        volume=first_present(dig(snapshot, "day", "v"), default=0),
    )


def article_fields(article: dict[str, Any]) -> dict[str, Any]:
    """Common headline fields of a news article (sentiment added by the caller)."""
    return {
        "title": article.get("title") or "",
        "url": article.get("article_url"),
        "published": article.get("published_utc"),
        "source": dig(article, "publisher", "name") or UNKNOWN_SOURCE,
    }


def to_market_status(body: dict[str, Any]) -> MarketStatus:
    """Map Polygon's `market` flag to OPEN / CLOSED, or UNKNOWN when absent."""
    market = body.get("market")
    if market is None:
        status = MarketState.UNKNOWN
    elif str(market).lower() == "open":
        status = MarketState.OPEN
    else:
        status = MarketState.CLOSED
    return MarketStatus(
        status=status,
        next_open=body.get("nextOpen"),
        next_close=body.get("nextClose"),
    )


def to_search_result(item: dict[str, Any]) -> TickerSearchResult:
    """Pass a reference-ticker search hit through unchanged."""
    return TickerSearchResult.model_validate(item)
