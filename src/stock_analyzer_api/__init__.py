"""Stock analyzer API: Polygon market data and Gemini insights for the dashboard."""
