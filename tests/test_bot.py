"""Tests for the bot process wiring: ready, message, slash command and main."""

from unittest.mock import Mock, MagicMock, AsyncMock, patch

import pytest

import bot as bot_module
from domains.news.delivery import InteractionTarget


@pytest.fixture
def scheduler():
    """Scheduler double whose start() flips `running` like APScheduler's."""
    sched = MagicMock()
    sched.running = False
    sched.start.side_effect = lambda: setattr(sched, "running", True)
    return sched


class TestOnReady:
    """Tests for on_ready."""

    @pytest.mark.asyncio
    async def test_registers_and_starts_once(self, scheduler):
        """A reconnect's second on_ready does not register jobs again."""
        with patch.object(bot_module, "scheduler", scheduler), \
             patch.object(bot_module.bot.tree, "sync", AsyncMock(return_value=[])) as mock_sync:
            await bot_module.on_ready()
            await bot_module.on_ready()

        assert scheduler.add_job.call_count == 1
        assert scheduler.add_job.call_args.kwargs["id"] == "news_daily_news"
        scheduler.start.assert_called_once()
        assert mock_sync.await_count == 2

    @pytest.mark.asyncio
    async def test_sync_failure_is_not_fatal(self, scheduler):
        """A slash command sync error is logged and startup continues."""
        with patch.object(bot_module, "scheduler", scheduler), \
             patch.object(bot_module.bot.tree, "sync", AsyncMock(side_effect=RuntimeError("403"))), \
             patch.object(bot_module, "logger") as mock_logger:
            await bot_module.on_ready()

        mock_logger.error.assert_called_once()
        scheduler.start.assert_called_once()


class TestOnMessage:
    """Tests for on_message."""

    @pytest.mark.asyncio
    async def test_forwards_to_news_domain(self):
        """Every inbound message goes to the news domain."""
        message = Mock()
        with patch.object(bot_module.news_domain, "handle_message", AsyncMock()) as mock_handle:
            await bot_module.on_message(message)

        mock_handle.assert_awaited_once_with(message)


class TestNewsCommand:
    """Tests for the /news slash command."""

    @pytest.mark.asyncio
    async def test_defers_then_delivers_via_followup(self):
        """The interaction is deferred before the pipeline runs."""
        interaction = Mock()
        interaction.response.defer = AsyncMock()

        async def compose(target, topic, ai_filter):
            assert interaction.response.defer.await_count == 1

        with patch.object(bot_module.news_domain.pipeline, "compose_and_send",
                          AsyncMock(side_effect=compose)) as mock_compose:
            await bot_module.cmd_news.callback(interaction, "chips", True)

        target, topic = mock_compose.await_args.args
        assert isinstance(target, InteractionTarget)
        assert target.interaction is interaction
        assert topic == "chips"
        assert mock_compose.await_args.kwargs == {"ai_filter": True}


class TestMain:
    """Tests for main()."""

    def test_warns_per_missing_setting_and_stops_without_token(self):
        """Each missing setting is warned about; no token means no login."""
        with patch.object(bot_module, "missing_settings",
                          return_value=["DISCORD_TOKEN", "NEWS_API_KEY"]), \
             patch.object(bot_module, "DISCORD_TOKEN", None), \
             patch.object(bot_module, "logger") as mock_logger, \
             patch.object(bot_module.bot, "run") as mock_run:
            bot_module.main()

        warned = [c.args[0] for c in mock_logger.warning.call_args_list]
        assert warned == ["DISCORD_TOKEN is not set", "NEWS_API_KEY is not set"]
        mock_logger.error.assert_called_once_with("DISCORD_TOKEN not set")
        mock_run.assert_not_called()

    def test_missing_keys_are_not_fatal(self):
        """With a token, missing API keys only warn and the bot still runs."""
        with patch.object(bot_module, "missing_settings", return_value=["OPENAI_API_KEY"]), \
             patch.object(bot_module, "DISCORD_TOKEN", "token-123"), \
             patch.object(bot_module, "logger") as mock_logger, \
             patch.object(bot_module.bot, "run") as mock_run:
            bot_module.main()

        mock_logger.warning.assert_called_once_with("OPENAI_API_KEY is not set")
        mock_run.assert_called_once_with("token-123")
