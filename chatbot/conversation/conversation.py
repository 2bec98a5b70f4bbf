# Append-only message log.
# Owns its id counter and turn generation; one instance per conversation.

from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

from .types import Message, Role

SEED_GREETING = "Hi! I'm your assistant. Ask me anything."


class Conversation:
    def __init__(self, greeting: Optional[str] = SEED_GREETING):
        self._messages: List[Message] = []
        self._next_id = 1
        # advanced on every user turn; replies carry the generation they answer
        self.generation = 0
        if greeting:
            self._append(Role.BOT, greeting)

    def _append(self, role: Role, text: str) -> Message:
        msg = Message(id=self._next_id, role=role, text=text)
        self._next_id += 1
        self._messages.append(msg)
        return msg

    def append_user(self, text: str) -> Message:
        msg = self._append(Role.USER, text)
        self.generation += 1
        return msg

    def append_bot(self, text: str) -> Message:
        return self._append(Role.BOT, text)

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def last(self) -> Optional[Message]:
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))
