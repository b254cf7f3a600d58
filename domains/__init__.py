"""Domain modules for the AI news bot."""

from .base import Domain, ScheduledTask

__all__ = ["Domain", "ScheduledTask"]
