"""Gemini generateContent over REST, with backoff on quota pressure."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from siteforge.llm.retry import ProviderRejectedError, fetch_with_backoff

logger = logging.getLogger(__name__)


class GeminiProvider:
    """Calls ``models/<model>:generateContent`` and returns the raw JSON body."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        endpoint: str,
        api_key: str | None = None,
        retries: int = 3,
        base_delay: float = 1.0,
    ):
        self._client = client
        self._endpoint = endpoint
        self._api_key = api_key
        self._retries = retries
        self._base_delay = base_delay

    async def generate_content(self, system_prompt: str, user_prompt: str) -> dict[str, Any]:
        if not self._api_key:
            raise ProviderRejectedError("AI Service Error: GEMINI_API_KEY is not configured.")
        payload = {
            "systemInstruction": {"parts": [{"text": system_prompt}]},
            "contents": [{"parts": [{"text": user_prompt}]}],
        }
        headers = {"Content-Type": "application/json", "x-goog-api-key": self._api_key}

        async def _post() -> httpx.Response:
            return await self._client.post(self._endpoint, json=payload, headers=headers)

        return await fetch_with_backoff(_post, retries=self._retries, base_delay=self._base_delay)
