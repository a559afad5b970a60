"""Pydantic schemas returned to the dashboard. Built per request, never persisted."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case fields as camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Sentiment(str, Enum):
    """Tone of a news headline."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class MarketState(str, Enum):
    """Exchange open/closed state."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"
    UNKNOWN = "UNKNOWN"


class Quote(CamelModel):
    """Snapshot plus reference metadata for one ticker."""

    symbol: str
    name: str
    exchange: str
    price: float = 0
    volume: float = 0
    change: float = 0
    change_percent: float = 0
    open: float = 0
    prev_close: float = 0
    high: float = 0
    low: float = 0
    avg_volume: float | None = None
    market_cap: float | None = None
    week_52_high: float | None = Field(default=None, alias="week52High")
    week_52_low: float | None = Field(default=None, alias="week52Low")
    description: str | None = None


class ChartPoint(CamelModel):
    """One OHLCV aggregate bar; timestamp is epoch milliseconds."""

    timestamp: int
    open: float = 0
    high: float = 0
    low: float = 0
    close: float = 0
    volume: float = 0


class TickerSearchResult(BaseModel):
    """Search hit; upstream reference fields are passed through as-is."""

    model_config = ConfigDict(extra="allow")

    ticker: str = ""
    name: str | None = None


class MoverEntry(CamelModel):
    """Row of a gainers/losers/most-active list."""

    symbol: str
    name: str
    price: float = 0
    change_percent: float = 0
    volume: float = 0


class SectorEntry(CamelModel):
    """Sector performance, taken from the sector's representative ETF."""

    name: str
    change_percent: float = 0


class IndexEntry(CamelModel):
    """Headline index, tracked through its ETF."""

    symbol: str
    name: str
    price: float = 0
    change_percent: float = 0


class NewsItem(BaseModel):
    """Market-wide headline with AI sentiment."""

    title: str
    url: str | None = None
    published: str | None = None
    source: str = "Unknown"
    sentiment: Sentiment = Sentiment.NEUTRAL


class SymbolNewsItem(BaseModel):
    """Ticker headline with AI sentiment (keeps upstream's published_utc key)."""

    title: str
    url: str | None = None
    published_utc: str | None = None
    source: str = "Unknown"
    sentiment: Sentiment = Sentiment.NEUTRAL


class AISuggestion(CamelModel):
    """Outlook text split into short and long term, plus trend drivers."""

    short_term: str
    long_term: str
    highlights: str


class ChatRequest(BaseModel):
    """Question about one stock."""

    question: str = Field(min_length=1)
    symbol: str = ""


class ChatAnswer(BaseModel):
    answer: str


class MarketStatus(CamelModel):
    """Exchange open/closed state with the next transitions, when known."""

    status: MarketState
    next_open: str | None = None
    next_close: str | None = None


class ErrorBody(BaseModel):
    """Body of every non-2xx JSON response."""

    error: str


__all__ = [
    "AISuggestion",
    "CamelModel",
    "ChartPoint",
    "ChatAnswer",
    "ChatRequest",
    "ErrorBody",
    "IndexEntry",
    "MarketState",
    "MarketStatus",
    "MoverEntry",
    "NewsItem",
    "Quote",
    "SectorEntry",
    "Sentiment",
    "SymbolNewsItem",
    "TickerSearchResult",
]
