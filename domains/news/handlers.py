"""Message-triggered digests."""

from logger import logger
from .delivery import ReplyTarget
from .formatter import strip_mentions


async def handle_message(message, pipeline, channel_id: int | None) -> None:
    """Reply to a message in the news channel with a digest on its text."""
    # Ignore bot messages, including our own
    if message.author.bot:
        return
    if channel_id is None or message.channel.id != channel_id:
        return

    topic = strip_mentions(message.content or "")
    if not topic:
        return

    logger.info(f'Topic received: "{topic}" from {message.author}')
    await pipeline.compose_and_send(ReplyTarget(message), topic, ai_filter=False)
