"""Thin async client for the NewsAPI /v2/everything endpoint."""

import httpx

from domains.news.types import Article
from logger import logger

NEWS_API_URL = "https://newsapi.org/v2"


class NewsApiError(Exception):
    """NewsAPI answered with `"status": "error"`."""

    def __init__(self, code: str, message: str):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


class NewsApiClient:
    """Keyword search over NewsAPI."""

    def __init__(self, api_key: str | None, base_url: str = NEWS_API_URL, timeout: float = 30):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def everything(
        self,
        q: str,
        sort_by: str = "publishedAt",
        page_size: int = 5,
        language: str | None = None
    ) -> list[Article]:
        """
        Search all articles matching a query.

        Args:
            q: Search query (NewsAPI boolean syntax allowed)
            sort_by: publishedAt, relevancy or popularity
            page_size: Max articles to return
            language: Two-letter language code; omitted when None

        Returns:
            Articles in the order NewsAPI returned them

        Raises:
            httpx.HTTPError: Transport failure or non-2xx status
            NewsApiError: API-level error payload
        """
        params = {"q": q, "sortBy": sort_by, "pageSize": page_size}
        if language:
            params["language"] = language

        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"{self.base_url}/everything",
                params=params,
                headers={"X-Api-Key": self.api_key or ""},
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()

        if data.get("status") == "error":
            raise NewsApiError(data.get("code", "unknown"), data.get("message", ""))

        articles = []
        for i, entry in enumerate(data.get("articles") or []):
            try:
                articles.append(Article.from_api(entry))
            except (AttributeError, KeyError, TypeError, ValueError, OverflowError) as e:
                logger.warning(f"Skipping malformed article #{i}: {e!r}")
        logger.debug(f"NewsAPI returned {len(articles)} of {data.get('totalResults', '?')} results")
        return articles
