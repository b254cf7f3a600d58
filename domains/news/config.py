"""News domain configuration."""

from config import TARGET_CHANNEL_ID, NEWS_PAGE_SIZE

CHANNEL_ID = TARGET_CHANNEL_ID  # digest + topic requests

# Daily digest
DAILY_TOPIC = "AI"
DAILY_HOUR = 0
DAILY_MINUTE = 0
DAILY_TIMEZONE = "Asia/Tokyo"

PAGE_SIZE = NEWS_PAGE_SIZE

# Curated mode widens the topic to AI coverage and pins English results
AI_QUERY_SUFFIX = '(AI OR "artificial intelligence" OR GenerativeAI)'
AI_LANGUAGE = "en"

DISPLAY_TIMEZONE = "Asia/Tokyo"

SUMMARY_MAX_TOKENS = 400
SUMMARY_INSTRUCTION = (
    "次の複数記事を日本語 200 字以内で分かりやすく要約し、"
    "箇条書きでポイントを整理してください。"
)
SUMMARY_FAILED = "⚠️ 要約に失敗しました"

CURATED_HEADER = "📰 今日の AI ニュースまとめ"
TOPIC_HEADER = "📰 **{topic}** に関する最新ニュースまとめ"
SEPARATOR = "──────────────"

DAILY_NOT_FOUND = "本日のニュースは見つかりませんでした。"
TOPIC_NOT_FOUND = "関連ニュースが見つかりませんでした。"
