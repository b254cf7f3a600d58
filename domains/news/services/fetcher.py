"""Article search on top of the NewsAPI client."""

from logger import logger
from ..config import AI_QUERY_SUFFIX, AI_LANGUAGE
from ..types import Article, Outcome


def build_query(topic: str, ai_filter: bool) -> tuple[str, str | None]:
    """Return (query, language) for a topic in curated or ad-hoc mode."""
    if ai_filter:
        return f"{topic} AND {AI_QUERY_SUFFIX}", AI_LANGUAGE
    return topic, None


async def fetch_news(client, topic: str, page_size: int = 5, ai_filter: bool = True) -> Outcome[list[Article]]:
    """Fetch the newest articles for a topic.

    Never raises: any failure is logged and comes back as an empty,
    degraded outcome, which callers treat the same as "no news".
    """
    query, language = build_query(topic, ai_filter)
    try:
        logger.info(f'Fetching news: "{query}"')
        articles = await client.everything(
            q=query,
            sort_by="publishedAt",
            page_size=page_size,
            language=language
        )
        articles = list(articles)[:page_size]
        logger.info(f"Fetched {len(articles)} articles")
        return Outcome.ok(articles)
    except Exception as e:
        logger.error(f"News fetch error: {e}")
        return Outcome.fallback([], str(e))
