"""Minimal OpenAI chat completions client."""

import httpx

OPENAI_API_URL = "https://api.openai.com/v1"


class OpenAIClient:
    """Single-turn text completion over the chat completions API."""

    def __init__(self, api_key: str | None, model: str = "gpt-4o", base_url: str = OPENAI_API_URL):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")

    async def complete(self, prompt: str, max_tokens: int = 400) -> str:
        """Send one user message and return the stripped reply text.

        HTTP and transport errors propagate to the caller.
        """
        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{self.base_url}/chat/completions",
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json"
                },
                json={
                    "model": self.model,
                    "messages": [{"role": "user", "content": prompt}],
                    "max_tokens": max_tokens
                },
                timeout=60
            )
            response.raise_for_status()
            data = response.json()

        content = data["choices"][0]["message"].get("content")
        return (content or "").strip()
