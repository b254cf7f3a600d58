"""Global configuration for the AI news bot."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def parse_int(value: str | None, default: int | None = None) -> int | None:
    """Parse an integer setting, returning `default` for unset or non-numeric values."""
    value = (value or "").strip()
    return int(value) if value.isdigit() else default


# Discord
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")

# Channel the daily digest is posted to and topic requests are read from
TARGET_CHANNEL_ID = parse_int(os.getenv("TARGET_CHANNEL_ID"))

# OpenAI
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")

# NewsAPI
NEWS_API_KEY = os.getenv("NEWS_API_KEY")
NEWS_PAGE_SIZE = parse_int(os.getenv("NEWS_PAGE_SIZE"), default=5) or 5

# Checked at startup; a missing value is only warned about
REQUIRED_SETTINGS = ("DISCORD_TOKEN", "TARGET_CHANNEL_ID", "OPENAI_API_KEY", "NEWS_API_KEY")


def missing_settings() -> list[str]:
    """Names of required settings that are unset."""
    values = globals()
    return [name for name in REQUIRED_SETTINGS if not values.get(name)]


# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
LOG_DIR = Path(os.getenv("LOG_DIR", Path(os.getenv("LOCALAPPDATA", ".")) / "ai-news-bot" / "logs"))
LOG_DIR.mkdir(parents=True, exist_ok=True)
