# Message normalization and provider selection.
# Both are pure: filter/relabel only, never reorder.

from __future__ import annotations
import logging
from typing import Any, List

from .types import NormalizedMessage, Provider

logger = logging.getLogger(__name__)

ACCEPTED_ROLES = ("user", "bot", "assistant", "system")


def normalize_messages(messages: Any) -> List[NormalizedMessage]:
    """Keep entries with a recognized role and string text; map bot -> assistant."""
    if not isinstance(messages, list):
        return []
    out: List[NormalizedMessage] = []
    for m in messages:
        if not isinstance(m, dict):
            continue
        role, text = m.get("role"), m.get("text")
        if not isinstance(text, str) or role not in ACCEPTED_ROLES:
            continue
        out.append(NormalizedMessage(role="assistant" if role == "bot" else role, content=text))
    return out


def resolve_provider(name: Any) -> Provider:
    """
    Map the external provider string to a Provider.
    Only the literal "gemini" selects Gemini; anything else (missing, unknown,
    wrong type) falls back to OpenAI. Callers rely on this permissive default.
    """
    if name == Provider.GEMINI.value:
        return Provider.GEMINI
    if name not in (None, Provider.OPENAI.value):
        logger.debug("unknown provider %r, falling back to openai", name)
    return Provider.OPENAI
