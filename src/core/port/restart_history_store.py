from abc import ABC, abstractmethod
from datetime import datetime


class RestartHistoryStore(ABC):
    @abstractmethod
    def load(self) -> list[datetime]:
        raise NotImplementedError

    @abstractmethod
    def append(self, restarted_at: datetime) -> None:
        raise NotImplementedError

    @abstractmethod
    def replace(self, events: list[datetime]) -> None:
        raise NotImplementedError
