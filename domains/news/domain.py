"""News domain implementation."""

from domains.base import Domain, ScheduledTask
from .config import CHANNEL_ID
from .handlers import handle_message
from .pipeline import NewsPipeline
from .schedules import SCHEDULES


class NewsDomain(Domain):
    """Daily AI digest plus on-demand topic digests."""

    def __init__(self, pipeline: NewsPipeline):
        self.pipeline = pipeline

    @property
    def name(self) -> str:
        return "news"

    @property
    def channel_id(self) -> int | None:
        return CHANNEL_ID

    @property
    def schedules(self) -> list[ScheduledTask]:
        return SCHEDULES

    async def handle_message(self, message) -> None:
        await handle_message(message, self.pipeline, self.channel_id)
