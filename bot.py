"""AI News Bot - Main Bot.

Posts a daily AI news digest to one Discord channel and answers topic
requests posted in that channel with an on-demand digest.
"""

import discord
from discord import app_commands
from discord.ext import commands
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from news_client import NewsApiClient
from openai_client import OpenAIClient
from logger import logger
from config import (
    DISCORD_TOKEN,
    NEWS_API_KEY,
    NEWS_PAGE_SIZE,
    OPENAI_API_KEY,
    OPENAI_MODEL,
    missing_settings,
)
from domains.news import NewsDomain, NewsPipeline
from domains.news.delivery import InteractionTarget

# Initialize bot
intents = discord.Intents.default()
intents.message_content = True
bot = commands.Bot(command_prefix="/", intents=intents)

# Initialize scheduler
scheduler = AsyncIOScheduler()

news_domain = NewsDomain(
    NewsPipeline(
        news_client=NewsApiClient(NEWS_API_KEY),
        llm_client=OpenAIClient(OPENAI_API_KEY, model=OPENAI_MODEL),
        page_size=NEWS_PAGE_SIZE,
    )
)


@bot.event
async def on_ready():
    """Called when bot is connected and ready."""
    logger.info(f"Logged in as {bot.user}")

    # Sync slash commands with Discord
    try:
        synced = await bot.tree.sync()
        logger.info(f"Synced {len(synced)} slash commands")
    except Exception as e:
        logger.error(f"Failed to sync slash commands: {e}")

    # on_ready fires again after reconnects
    if scheduler.running:
        return

    news_domain.register_schedules(scheduler, bot)
    logger.info(f"Registered domain: {news_domain.name} (channel: {news_domain.channel_id})")

    scheduler.start()
    logger.info(f"Scheduler started with {len(scheduler.get_jobs())} jobs")


@bot.event
async def on_message(message):
    """Handle incoming messages."""
    await news_domain.handle_message(message)


@bot.tree.command(name="news", description="Summarise the latest news on a topic")
@app_commands.describe(
    topic="What to search for",
    ai_only="Only AI-related English coverage"
)
async def cmd_news(interaction: discord.Interaction, topic: str, ai_only: bool = False):
    """Run the news pipeline on demand."""
    logger.info(f"Manual news trigger: '{topic}' (ai_only={ai_only}) by {interaction.user}")
    await interaction.response.defer()
    await news_domain.pipeline.compose_and_send(InteractionTarget(interaction), topic, ai_filter=ai_only)


@bot.event
async def on_error(event, *args, **kwargs):
    """Handle errors."""
    logger.exception(f"Bot error in {event}: {args}")


def main():
    """Entry point."""
    for name in missing_settings():
        logger.warning(f"{name} is not set")

    if not DISCORD_TOKEN:
        logger.error("DISCORD_TOKEN not set")
        return

    logger.info("Starting AI News Bot...")
    bot.run(DISCORD_TOKEN)


if __name__ == "__main__":
    main()
