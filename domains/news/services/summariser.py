"""LLM summary of a batch of articles."""

from typing import Sequence

from logger import logger
from ..config import SUMMARY_INSTRUCTION, SUMMARY_MAX_TOKENS, SUMMARY_FAILED
from ..types import Article, Outcome


def build_prompt(articles: Sequence[Article]) -> str:
    body = "\n\n".join(
        f"【{i}】{a.title}\n{a.description or ''}"
        for i, a in enumerate(articles, start=1)
    )
    return f"{SUMMARY_INSTRUCTION}\n\n{body}"


async def summarise(client, articles: Sequence[Article]) -> Outcome[str]:
    """Summarise articles, falling back to a fixed notice on any error."""
    try:
        summary = await client.complete(build_prompt(articles), max_tokens=SUMMARY_MAX_TOKENS)
        logger.info(f"Summary complete ({len(summary)} chars)")
        return Outcome.ok(summary)
    except Exception as e:
        logger.error(f"Summarise error: {e}")
        return Outcome.fallback(SUMMARY_FAILED, str(e))
