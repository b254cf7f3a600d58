"""News domain: daily and on-demand news digests."""

from .domain import NewsDomain
from .pipeline import NewsPipeline

__all__ = ["NewsDomain", "NewsPipeline"]
