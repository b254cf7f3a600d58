"""News domain services."""

from .fetcher import fetch_news, build_query
from .summariser import summarise, build_prompt

__all__ = ["fetch_news", "build_query", "summarise", "build_prompt"]
