"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from unittest.mock import Mock, AsyncMock, patch

import pytest

from domains.news.types import Article


@pytest.fixture
def mock_discord_bot():
    """Create a mock Discord bot."""
    bot = Mock()
    bot.get_channel = Mock(return_value=Mock(send=AsyncMock()))
    bot.fetch_channel = AsyncMock()
    bot.user = Mock(name="NewsBot#1234")
    return bot


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx client."""
    with patch('httpx.AsyncClient') as mock:
        client = AsyncMock()
        mock.return_value.__aenter__.return_value = client
        yield client


@pytest.fixture
def articles():
    """Two articles, newest first."""
    return [
        Article(
            title="OpenAI ships new model",
            description="A faster reasoning model.",
            url="https://example.com/openai",
            published_at=datetime(2025, 5, 1, 16, 30, tzinfo=timezone.utc),
        ),
        Article(
            title="EU AI Act update",
            description=None,
            url="https://example.com/eu-ai-act",
            published_at=datetime(2025, 4, 30, 9, 0, tzinfo=timezone.utc),
        ),
    ]


@pytest.fixture
def news_client(articles):
    """NewsAPI client double returning the sample articles."""
    client = Mock()
    client.everything = AsyncMock(return_value=articles)
    return client


@pytest.fixture
def llm_client():
    """LLM client double returning a canned summary."""
    client = Mock()
    client.complete = AsyncMock(return_value="・新モデル\n・規制動向")
    return client


@pytest.fixture
def channel():
    """Text channel whose send returns a sent-message mock."""
    return Mock(id=4242, send=AsyncMock(return_value=Mock()))


@pytest.fixture
def make_message(channel):
    """Factory for inbound Discord messages."""
    def _make(content: str, is_bot: bool = False, channel_id: int = 4242):
        message = Mock()
        message.content = content
        message.author = Mock(bot=is_bot)
        message.channel = Mock(id=channel_id)
        message.reply = AsyncMock(return_value=Mock())
        return message
    return _make
