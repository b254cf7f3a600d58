"""Message rendering for news digests.

Everything here is pure: same input, same string, no I/O.
"""

import re
from datetime import datetime
from typing import Sequence
from zoneinfo import ZoneInfo

from .config import CURATED_HEADER, TOPIC_HEADER, SEPARATOR, DISPLAY_TIMEZONE
from .types import Article

_DISPLAY_TZ = ZoneInfo(DISPLAY_TIMEZONE)

# <@123> / <@!123> users, <@&123> roles, <#123> channels
MENTION_PATTERN = re.compile(r"<(?:@[!&]?|#)[0-9]+>")


def to_jst_date(dt: datetime) -> str:
    """Render a timestamp as a YYYY/MM/DD date in Tokyo time."""
    return dt.astimezone(_DISPLAY_TZ).strftime("%Y/%m/%d")


def build_header(topic: str, ai_filter: bool) -> str:
    if ai_filter:
        return CURATED_HEADER
    return TOPIC_HEADER.format(topic=topic)


def build_article_list(articles: Sequence[Article]) -> str:
    """One `【n】date ｜ url` line per article, in input order."""
    return "\n".join(
        f"【{i}】{to_jst_date(a.published_at)} ｜ {a.url}"
        for i, a in enumerate(articles, start=1)
    )


def format_message(topic: str, ai_filter: bool, summary: str, articles: Sequence[Article]) -> str:
    """Assemble header, summary, separator and the dated article index."""
    return (
        f"{build_header(topic, ai_filter)}\n{summary}\n"
        f"{SEPARATOR}\n"
        f"{build_article_list(articles)}"
    )


def strip_mentions(text: str) -> str:
    """Remove user, role and channel mention markup and trim.

    Repeats until nothing matches, so markup exposed by removing an inner
    mention (e.g. `<@<@1>2>`) is removed too.
    """
    while True:
        stripped = MENTION_PATTERN.sub("", text)
        if stripped == text:
            return stripped.strip()
        text = stripped
