"""Prompt templates sent to the AI provider, one per use case."""

OUTLOOK_PROMPT = """
Give two bullet point suggestions for {symbol} stock:
1. Short-Term outlook (1-3 months)
2. Long-Term outlook (6+ months)
Use plain language, no disclaimers.
"""

HIGHLIGHTS_PROMPT = """
In 2-3 bullet points, explain the key drivers currently influencing {symbol}'s stock trend.
Use plain language. Return only the bullets.
"""

SENTIMENT_PROMPT = """
Analyze the sentiment of the following news headline and return ONLY one word: Positive, Negative, or Neutral.

Headline: "{headline}"
"""

CHAT_PROMPT = """
You are a helpful AI financial assistant. Answer this question related to the stock {symbol}:

"{question}"

Respond with a concise, investor-friendly answer."""


def outlook_prompt(symbol: str) -> str:
    return OUTLOOK_PROMPT.format(symbol=symbol)


def highlights_prompt(symbol: str) -> str:
    return HIGHLIGHTS_PROMPT.format(symbol=symbol)


def sentiment_prompt(headline: str) -> str:
    return SENTIMENT_PROMPT.format(headline=headline)


def chat_prompt(symbol: str, question: str) -> str:
    return CHAT_PROMPT.format(symbol=symbol, question=question)
