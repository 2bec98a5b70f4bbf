from __future__ import annotations
import asyncio


class CancellationToken:
    """
    Cooperative cancellation for one reply computation.
    The controller cancels it on supersession; the computation checks it
    before mutating the conversation.
    """

    def __init__(self, generation: int):
        self.generation = generation
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def sleep(self, seconds: float) -> bool:
        """Wait up to `seconds`; return early with True if cancelled meanwhile."""
        if seconds <= 0:
            return self.cancelled
        try:
            await asyncio.wait_for(self._event.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            pass
        return self.cancelled
