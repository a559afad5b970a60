"""Service layer: provider orchestration, normalization and exception-to-HTTP mapping."""
from stock_analyzer_api.services.insights import InsightsService
from stock_analyzer_api.services.market import MarketOverviewService
from stock_analyzer_api.services.news import NewsService
from stock_analyzer_api.services.stocks import StocksService

__all__ = [
    "InsightsService",
    "MarketOverviewService",
    "NewsService",
    "StocksService",
]
