from abc import ABC, abstractmethod


class CancellationToken(ABC):
    @property
    @abstractmethod
    def is_cancelled(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def cancel(self) -> None:
        raise NotImplementedError

    @abstractmethod
    async def sleep(self, seconds: float) -> bool:
        """Pause for ``seconds`` unless cancelled first. Returns True if cancelled."""
        raise NotImplementedError
