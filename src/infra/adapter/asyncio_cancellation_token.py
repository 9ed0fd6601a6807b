import asyncio

from core.port.cancellation_token import CancellationToken


class AsyncioCancellationToken(CancellationToken):
    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def sleep(self, seconds: float) -> bool:
        if self._event.is_set():
            return True

        try:
            await asyncio.wait_for(self._event.wait(), timeout=max(seconds, 0))
        except asyncio.TimeoutError:
            return False

        return True
