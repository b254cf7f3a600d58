"""Type definitions for the news pipeline."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

from dateutil.parser import isoparse

T = TypeVar("T")


@dataclass(frozen=True)
class Article:
    """A single search hit from NewsAPI."""
    title: str
    description: Optional[str]
    url: str
    published_at: datetime

    @classmethod
    def from_api(cls, data: dict) -> "Article":
        """Build from one entry of an /everything `articles` array.

        Raises ValueError when the url or timestamp is missing or unparseable.
        """
        if not data.get("url"):
            raise ValueError("article has no url")
        if not data.get("publishedAt"):
            raise ValueError("article has no publishedAt")
        published = isoparse(data["publishedAt"])
        if published.tzinfo is None:
            published = published.replace(tzinfo=timezone.utc)
        return cls(
            title=data.get("title") or "",
            description=data.get("description"),
            url=data["url"],
            published_at=published,
        )


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of an external call that degrades instead of raising.

    `degraded` is True when the call failed and `value` holds the fallback.
    """
    value: T
    degraded: bool = False
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fallback(cls, default: T, error: str) -> "Outcome[T]":
        return cls(value=default, degraded=True, error=error)
