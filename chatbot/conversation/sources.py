# Reply sources the controller can drive.
# Both take the full visible history and return the bot's reply text,
# raising on failure; the controller turns failures into bot turns.

from __future__ import annotations
import asyncio
from typing import Any, Optional, Protocol, Sequence

import requests

from chatbot.responder import LocalResponder
from .types import Message, Role


class ReplySource(Protocol):
    async def generate(self, history: Sequence[Message]) -> str:
        ...


class RemoteReplyError(Exception):
    """Gateway answered with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


def thinking_delay(text: str) -> float:
    """Simulated thinking time in seconds: grows with input length, capped at 1.2s."""
    return min(1.2, 0.4 + max(0, len(text)) * 0.02)


class LocalReplySource:
    def __init__(self, responder: Optional[LocalResponder] = None):
        self.responder = responder or LocalResponder()

    async def generate(self, history: Sequence[Message]) -> str:
        last_user = next((m for m in reversed(history) if m.role == Role.USER), None)
        return self.responder.reply(last_user.text if last_user else "")


class RemoteReplySource:
    """Posts the history to a running gateway (POST {base_url}/api/chat)."""

    def __init__(self, base_url: str, provider: str = "openai", timeout: float = 90.0, session: Any = None):
        self.base_url = base_url.rstrip("/")
        self.provider = provider
        self.timeout = timeout
        self.session = session or requests

    def _post(self, history: Sequence[Message]) -> str:
        resp = self.session.post(
            f"{self.base_url}/api/chat",
            json={"provider": self.provider, "messages": [m.to_wire() for m in history]},
            timeout=self.timeout,
        )
        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        if not resp.ok:
            raise RemoteReplyError(data.get("error") or f"HTTP {resp.status_code}", status_code=resp.status_code)
        text = data.get("text")
        if not isinstance(text, str) or not text:
            raise RemoteReplyError("Gateway returned no text", status_code=resp.status_code)
        return text

    async def generate(self, history: Sequence[Message]) -> str:
        # requests is blocking; keep the event loop free
        return await asyncio.to_thread(self._post, list(history))
