"""
HVAC chat assistant.

Answers questions about HVAC concepts, the design form and the generated
summary. Grok is tried first, then Groq.
"""

import logging

from config import CHAT_TEMPERATURE
from services.hvac_prompts import CHAT_SYSTEM_PROMPT
from services.llm import available_providers, complete

logger = logging.getLogger(__name__)

GREETING = "Hello! I'm your HVAC design assistant. How can I help you today?"


class ChatUnavailableError(Exception):
    """No provider could answer the chat message."""


def _to_messages(history: list) -> list[dict]:
    """Build provider messages; the UI's 'model' role is the assistant."""
    messages = [{"role": "system", "content": CHAT_SYSTEM_PROMPT}]
    for msg in history:
        role = msg["role"]
        messages.append({
            "role": "user" if role == "user" else "assistant",
            "content": msg["content"],
        })
    return messages


async def chat(history: list) -> str:
    """
    Answer the last user message of a conversation.

    Args:
        history: List of {"role": "user"/"model", "content": "..."}, oldest first.

    Returns:
        The assistant's reply text.
    """
    providers = available_providers()
    if not providers:
        raise ChatUnavailableError("The chat assistant is not configured. Please try again later.")

    messages = _to_messages(history)
    last_error = None
    for provider in providers:
        try:
            return await complete(messages, temperature=CHAT_TEMPERATURE, max_tokens=1024, provider=provider)
        except Exception as e:
            logger.warning("Chat provider %s failed: %s", provider[0], e)
            last_error = e

    raise ChatUnavailableError(f"Sorry, the assistant could not answer right now: {last_error}")
