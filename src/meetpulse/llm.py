import os
import logging
from typing import Optional

from openai import OpenAI

from dotenv import load_dotenv
load_dotenv()

logger = logging.getLogger(__name__)

_openai_client = None

DEFAULT_MODEL = "gpt-4o-mini"

SYSTEM_PROMPT = """You analyze meeting feedback for the people who host the meetings.
Answer only from the feedback you are given. Be concise and concrete.
"""


def _openai_client_once():
    global _openai_client
    if _openai_client is None:
        api_key = os.environ.get("OPENAI_API_KEY")
        if not api_key:
            raise ValueError(
                "OPENAI_API_KEY environment variable is not set. "
                "Please add it to your .env file."
            )
        _openai_client = OpenAI(api_key=api_key)
    return _openai_client


def get_current_model() -> str:
    """Model name from configuration, falling back to the default."""
    from .config import get_config
    return get_config().openai_model or DEFAULT_MODEL


def ask(prompt: str, model: Optional[str] = None) -> str:
    """Simple single-turn prompt to the LLM.

    Args:
        prompt: The prompt to send to the LLM
        model: Model to use (defaults to the configured model)

    Returns:
        LLM response text
    """
    model = model or get_current_model()
    client = _openai_client_once()
    logger.debug(f"LLM request: model={model}, prompt_chars={len(prompt)}")
    resp = client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
    )
    return resp.choices[0].message.content or ""
