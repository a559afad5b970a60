"""API routers for dashboard endpoints.

Includes routes for:
- /api/quote, /api/search, /api/chart - Single-stock data (Polygon)
- /api/top-gainers, /api/top-losers, /api/most-active, /api/sectors,
  /api/indices, /api/market-status - Market-wide views
- /api/news - Headlines with AI sentiment
- /api/ai - Gemini outlook and chat
"""
from stock_analyzer_api.routers.ai import router as ai_router
from stock_analyzer_api.routers.market import router as market_router
from stock_analyzer_api.routers.news import router as news_router
from stock_analyzer_api.routers.stocks import router as stocks_router

__all__ = [
    "ai_router",
    "market_router",
    "news_router",
    "stocks_router",
]
