"""News domain scheduled tasks."""

from domains.base import ScheduledTask
from .config import CHANNEL_ID, DAILY_TOPIC, DAILY_HOUR, DAILY_MINUTE, DAILY_TIMEZONE
from .delivery import ChannelTarget

from logger import logger


async def daily_news(bot, domain):
    """Post the daily AI news digest."""
    logger.info("Daily news job fired")
    if CHANNEL_ID is None:
        logger.error("TARGET_CHANNEL_ID not set, skipping daily news")
        return

    channel = bot.get_channel(CHANNEL_ID)
    if not channel:
        try:
            channel = await bot.fetch_channel(CHANNEL_ID)
        except Exception as e:
            logger.error(f"Could not find news channel {CHANNEL_ID}: {e}")
            return

    await domain.pipeline.compose_and_send(ChannelTarget(channel), DAILY_TOPIC, ai_filter=True)


SCHEDULES = [
    ScheduledTask(
        name="daily_news",
        handler=daily_news,
        hour=DAILY_HOUR,
        minute=DAILY_MINUTE,
        timezone=DAILY_TIMEZONE
    )
]
