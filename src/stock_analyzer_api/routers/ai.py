"""Generative AI routes (Gemini): outlook suggestions and stock chat."""
from fastapi import APIRouter

from stock_analyzer_api.dependencies import InsightsServiceDep, Symbol
from stock_analyzer_api.schemas import AISuggestion, ChatAnswer, ChatRequest

router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.get("/suggest/{symbol}", response_model=AISuggestion)
async def get_suggestion(sym: Symbol, service: InsightsServiceDep) -> AISuggestion:
    """Short-term and long-term outlook plus key trend drivers."""
    return await service.suggest(sym)


@router.post("/chat", response_model=ChatAnswer)
async def chat(body: ChatRequest, service: InsightsServiceDep) -> ChatAnswer:
    """Answer one question about a stock. Each call is independent (no history)."""
    return await service.chat(body.question, body.symbol)
