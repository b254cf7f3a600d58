"""Fetch -> summarise -> format -> deliver."""

from logger import logger
from .config import DAILY_TOPIC, PAGE_SIZE
from .delivery import DeliveryTarget
from .formatter import format_message
from .services import fetch_news, summarise


class NewsPipeline:
    """Composes a news digest and posts it to a delivery target.

    The search and LLM clients are injected so tests can swap in doubles.
    """

    def __init__(self, news_client, llm_client, page_size: int = PAGE_SIZE):
        self.news_client = news_client
        self.llm_client = llm_client
        self.page_size = page_size

    async def compose_and_send(
        self,
        target: DeliveryTarget,
        topic: str = DAILY_TOPIC,
        ai_filter: bool = True
    ) -> None:
        """
        Build one digest for `topic` and send it to `target`.

        Args:
            target: Channel, reply or interaction to post to
            topic: Search topic
            ai_filter: Curated AI/English search when True, free text otherwise

        Fetch and summarise failures degrade internally; a failing send
        propagates to the caller.
        """
        fetched = await fetch_news(self.news_client, topic, self.page_size, ai_filter=ai_filter)
        articles = fetched.value

        if not articles:
            await target.send(target.not_found_notice, suppress_previews=False)
            logger.info(f"No articles for '{topic}', sent not-found notice")
            return

        summary = await summarise(self.llm_client, articles)
        message = format_message(topic, ai_filter, summary.value, articles)

        await target.send(message)
        logger.info(f"Posted digest for '{topic}' ({len(articles)} articles, {len(message)} chars)")
