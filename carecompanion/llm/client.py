"""
Assistant LLM Client

Thin async client for an OpenAI-compatible chat completions endpoint.
Default model: gpt-4.1-nano

Uses one pooled HTTP client shared by all instances.
"""

import httpx
import logging
from typing import Optional

from carecompanion.config import get_settings

logger = logging.getLogger(__name__)

_shared_client: Optional[httpx.AsyncClient] = None


async def get_shared_client() -> httpx.AsyncClient:
    """Get or create the shared HTTP client with connection pooling."""
    global _shared_client
    if _shared_client is None or _shared_client.is_closed:
        _shared_client = httpx.AsyncClient(
            timeout=httpx.Timeout(60.0, connect=10.0),
            limits=httpx.Limits(
                max_keepalive_connections=10,
                max_connections=20,
                keepalive_expiry=30.0,
            ),
        )
    return _shared_client


async def close_shared_client():
    """Close the shared client (call on app shutdown)."""
    global _shared_client
    if _shared_client is not None and not _shared_client.is_closed:
        await _shared_client.aclose()
        _shared_client = None


class LLMClient:
    """Client for chat completions with connection pooling."""

    def __init__(self, model: Optional[str] = None):
        self.settings = get_settings()
        self.base_url = self.settings.ai_base_url.rstrip("/")
        self.model = model or self.settings.ai_model
        self.headers = {
            "Authorization": f"Bearer {self.settings.ai_api_key}",
            "Content-Type": "application/json",
        }

    async def complete(
        self,
        messages: list[dict],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> dict:
        """
        Generate a completion.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: Override default model
            temperature: Sampling temperature (defaults to settings)
            max_tokens: Maximum tokens in response (defaults to settings)

        Returns:
            Full API response dict

        Raises:
            httpx.HTTPError: On transport failures or non-2xx responses
        """
        payload = {
            "model": model or self.model,
            "messages": messages,
            "temperature": self.settings.ai_temperature if temperature is None else temperature,
            "max_tokens": max_tokens or self.settings.ai_max_tokens,
        }

        client = await get_shared_client()
        response = await client.post(
            f"{self.base_url}/chat/completions",
            headers=self.headers,
            json=payload,
        )
        response.raise_for_status()
        return response.json()

    async def complete_text(
        self,
        messages: list[dict],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """Generate a completion and return just the text content."""
        result = await self.complete(
            messages=messages,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return result["choices"][0]["message"]["content"]
