"""
LLM provider gateway.

Grok (xAI, OpenAI-compatible API) is the primary provider and Groq the
second one. Clients are async and created lazily, once per process.
"""

import json
import logging
import re
from typing import Optional

from config import (
    GROK_API_KEY, GROK_MODEL, GROK_BASE_URL,
    GROQ_API_KEY, GROQ_MODEL,
    LLM_TIMEOUT, LLM_MAX_RETRIES,
)

logger = logging.getLogger(__name__)

# Lazy-initialized clients
_grok_client = None
_groq_client = None


class LLMUnavailableError(Exception):
    """No provider is configured."""


def _get_grok_client():
    """Lazy initialization of Grok client using OpenAI SDK."""
    global _grok_client
    if _grok_client is None and GROK_API_KEY:
        from openai import AsyncOpenAI
        _grok_client = AsyncOpenAI(
            api_key=GROK_API_KEY,
            base_url=GROK_BASE_URL,
            timeout=LLM_TIMEOUT,
            max_retries=LLM_MAX_RETRIES,
        )
    return _grok_client


def _get_groq_client():
    """Lazy initialization of Groq client."""
    global _groq_client
    if _groq_client is None and GROQ_API_KEY:
        from groq import AsyncGroq
        _groq_client = AsyncGroq(
            api_key=GROQ_API_KEY,
            timeout=LLM_TIMEOUT,
            max_retries=LLM_MAX_RETRIES,
        )
    return _groq_client


def available_providers() -> list[tuple[str, object, str]]:
    """Configured providers in preference order as (name, client, model)."""
    providers = []
    grok = _get_grok_client()
    if grok is not None:
        providers.append(("grok", grok, GROK_MODEL))
    groq = _get_groq_client()
    if groq is not None:
        providers.append(("groq", groq, GROQ_MODEL))
    return providers


async def complete(
    messages: list[dict],
    temperature: float,
    max_tokens: int = 1536,
    provider: Optional[tuple[str, object, str]] = None,
) -> str:
    """
    Run one chat completion and return the reply text.

    Uses the given provider, or the first configured one.

    Raises:
        LLMUnavailableError: if no provider is configured.
    """
    if provider is None:
        providers = available_providers()
        if not providers:
            raise LLMUnavailableError("No LLM provider configured (set GROK_API_KEY or GROQ_API_KEY)")
        provider = providers[0]

    name, client, model = provider
    response = await client.chat.completions.create(
        model=model,
        messages=messages,
        temperature=temperature,
        max_tokens=max_tokens,
    )
    reply = response.choices[0].message.content
    logger.debug("%s completion: %d chars", name, len(reply or ""))
    return reply or ""


def extract_json_from_response(text: str) -> Optional[dict]:
    """Extract a JSON object from AI response text."""
    # Try ```json blocks first
    json_match = re.search(r'```(?:json)?\s*(\{.*?\})\s*```', text, re.DOTALL)
    if json_match:
        try:
            return json.loads(json_match.group(1))
        except json.JSONDecodeError:
            pass

    # Try any JSON object
    json_match = re.search(r'\{.*\}', text, re.DOTALL)
    if json_match:
        try:
            return json.loads(json_match.group())
        except json.JSONDecodeError:
            pass

    return None
