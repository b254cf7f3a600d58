"""Where a finished digest gets sent."""

from abc import ABC, abstractmethod

from .config import DAILY_NOT_FOUND, TOPIC_NOT_FOUND


class DeliveryTarget(ABC):
    """A place the pipeline can post one message to."""

    not_found_notice: str = TOPIC_NOT_FOUND

    @abstractmethod
    async def send(self, text: str, suppress_previews: bool = True):
        """Post `text`, returning the sent message."""
        pass


class ChannelTarget(DeliveryTarget):
    """Broadcast into a text channel."""

    not_found_notice = DAILY_NOT_FOUND

    def __init__(self, channel):
        self.channel = channel

    async def send(self, text: str, suppress_previews: bool = True):
        return await self.channel.send(text, suppress_embeds=suppress_previews)


class ReplyTarget(DeliveryTarget):
    """Reply to the message that asked for the digest."""

    def __init__(self, message):
        self.message = message

    async def send(self, text: str, suppress_previews: bool = True):
        return await self.message.reply(text, suppress_embeds=suppress_previews)


class InteractionTarget(DeliveryTarget):
    """Follow-up to a deferred slash command."""

    def __init__(self, interaction):
        self.interaction = interaction

    async def send(self, text: str, suppress_previews: bool = True):
        return await self.interaction.followup.send(text, suppress_embeds=suppress_previews, wait=True)
