# Conversation-side data structures.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Role(str, Enum):
    USER = "user"
    BOT = "bot"


@dataclass(frozen=True)
class Message:
    """One turn of the dialogue. Immutable once appended."""
    id: int
    role: Role
    text: str

    def to_wire(self) -> Dict[str, Any]:
        """Shape sent to the gateway's /api/chat."""
        return {"role": self.role.value, "text": self.text}
