"""Conversation controller.

Explicit state machine over one Conversation:

    Idle --submit--> Pending(g+1)          (supersedes any earlier Pending)
    Pending(g) --resolve(g)--> Idle        (only if g is still current)
    Pending(g) --resolve(g')--> Pending(g) (g' stale: result discarded)
    Pending(g) --cancel--> Idle

A reply computation is started at most once per "last user message".
Its result, success or failure, is appended as a bot turn unless its
token was cancelled first.
"""

from __future__ import annotations
import asyncio
import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence, Set

from .cancellation import CancellationToken
from .conversation import Conversation
from .sources import ReplySource
from .types import Message, Role

logger = logging.getLogger(__name__)


class State(str, Enum):
    IDLE = "idle"
    PENDING = "pending"


class ConversationController:
    def __init__(
        self,
        source: ReplySource,
        conversation: Optional[Conversation] = None,
        delay: Optional[Callable[[str], float]] = None,
    ):
        self.source = source
        self.conversation = conversation if conversation is not None else Conversation()
        self.delay = delay
        self.draft = ""
        self._token: Optional[CancellationToken] = None
        self._started_for: Optional[int] = None
        self._tasks: Set[asyncio.Task] = set()
        self._listeners: List[Callable[[Message], None]] = []

    # -------------------------
    # State
    # -------------------------
    @property
    def state(self) -> State:
        return State.PENDING if self._token is not None else State.IDLE

    @property
    def pending(self) -> bool:
        return self._token is not None

    @property
    def pending_generation(self) -> Optional[int]:
        return self._token.generation if self._token is not None else None

    def can_send(self, text: Optional[str] = None) -> bool:
        text = self.draft if text is None else text
        return bool(text.strip()) and not self.pending

    def subscribe(self, listener: Callable[[Message], None]) -> None:
        """Call `listener` with every message appended through this controller."""
        self._listeners.append(listener)

    # -------------------------
    # UI operations
    # -------------------------
    def submit(self, text: Optional[str] = None) -> bool:
        """
        Append a user turn and start its reply. Must be called from a running
        event loop. Returns False (no-op) on blank input or while pending.
        """
        if not self.can_send(text):
            return False
        text = self.draft if text is None else text
        self._emit(self.conversation.append_user(text.strip()))
        self.draft = ""
        self._sync()
        return True

    def cancel(self) -> bool:
        """Invalidate the outstanding computation and return to Idle."""
        if self._token is None:
            return False
        self._token.cancel()
        logger.debug("cancelled reply for generation %d", self._token.generation)
        self._token = None
        return True

    async def drain(self) -> None:
        """Wait until every started computation (current or superseded) has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # -------------------------
    # Reply trigger
    # -------------------------
    def _sync(self) -> None:
        last = self.conversation.last
        if last is None or last.role != Role.USER or last.id == self._started_for:
            return
        self._started_for = last.id
        self._start(self.conversation.generation, self.conversation.messages)

    def _start(self, generation: int, history: Sequence[Message]) -> None:
        if self._token is not None:
            self._token.cancel()
        token = CancellationToken(generation)
        self._token = token
        task = asyncio.get_running_loop().create_task(self._run(token, history))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, token: CancellationToken, history: Sequence[Message]) -> None:
        if self.delay is not None:
            if await token.sleep(self.delay(history[-1].text)):
                logger.debug("reply for generation %d cancelled while thinking", token.generation)
                return
        try:
            text = await self.source.generate(history)
        except Exception as e:
            text = f"Error: {str(e) or type(e).__name__}"
        self._resolve(token, text)

    def _resolve(self, token: CancellationToken, text: Optional[str]) -> None:
        if token.cancelled or token is not self._token:
            logger.debug("discarding stale reply for generation %d", token.generation)
            return
        self._token = None
        self._emit(self.conversation.append_bot(text))

    def _emit(self, msg: Message) -> None:
        for listener in self._listeners:
            listener(msg)
