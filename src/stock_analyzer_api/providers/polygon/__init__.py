"""Polygon.io market data provider."""
from stock_analyzer_api.providers.polygon.polygon_provider import PolygonProvider

__all__ = ["PolygonProvider"]
