from datetime import datetime

from core.port.restart_history_store import RestartHistoryStore


class MemoryRestartHistoryStore(RestartHistoryStore):
    def __init__(self) -> None:
        self._events: list[datetime] = []

    def load(self) -> list[datetime]:
        return list(self._events)

    def append(self, restarted_at: datetime) -> None:
        self._events.append(restarted_at)

    def replace(self, events: list[datetime]) -> None:
        self._events = sorted(events)
