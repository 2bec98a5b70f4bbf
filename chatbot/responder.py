# Rule-based local responder.
# First matching rule wins; no network, no failure modes besides the fallback.

from __future__ import annotations
import re
from datetime import datetime
from typing import Callable, Optional

CLARIFY = "Could you clarify that?"
GREETING = "Hello! How can I help you today?"
HELP = (
    "I can greet, tell the time/date, echo text, or tell a joke. "
    "Try 'time', 'date', 'echo your text', or 'joke'."
)
JOKE = "Why do programmers prefer dark mode? Because light attracts bugs."

_PUNCT = re.compile(r"[^\w\s]", re.ASCII)
_GREETING = re.compile(r"(^|\b)(hi|hello|hey|hola)(\b|!|\.)")
_HELP = re.compile(r"help|support|assist")
_TIME = re.compile(r"\btime\b")
_DATE = re.compile(r"\b(date|day)\b")
_JOKE = re.compile(r"\bjoke|funny\b")
_ECHO = re.compile(r"\becho\s+(.+)")
_ECHO_COMMAND = re.compile(r"^echo\s+\S")


def normalize(text: str) -> str:
    """Lowercase, strip punctuation, trim."""
    return _PUNCT.sub("", text.lower()).strip()


class LocalResponder:
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or datetime.now

    def classify(self, text: str) -> str:
        """Name of the rule that answers `text`."""
        t = normalize(text)
        if not t:
            return "clarify"
        # a leading echo command is never read for keywords
        if _ECHO_COMMAND.match(t):
            return "echo"
        if _GREETING.search(t):
            return "greeting"
        if _HELP.search(t):
            return "help"
        if _TIME.search(t):
            return "time"
        if _DATE.search(t):
            return "date"
        if _JOKE.search(t):
            return "joke"
        if _ECHO.search(t):
            return "echo"
        return "fallback"

    def reply(self, text: str) -> str:
        rule = self.classify(text)
        if rule == "clarify":
            return CLARIFY
        if rule == "greeting":
            return GREETING
        if rule == "help":
            return HELP
        if rule == "time":
            return f"The current time is {self.clock().strftime('%X')}."
        if rule == "date":
            return f"Today is {self.clock().strftime('%x')}."
        if rule == "joke":
            return JOKE
        if rule == "echo":
            # captured from the normalized text, so punctuation is already gone
            return _ECHO.search(normalize(text)).group(1)
        return f'You said: "{text}". I\'m a simple demo bot.'


def reply(text: str) -> str:
    return LocalResponder().reply(text)
