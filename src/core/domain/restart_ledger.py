from datetime import datetime, timedelta

from core.port.restart_history_store import RestartHistoryStore

RESTART_WINDOW = timedelta(hours=1)


class RestartLedger:
    """Rolling one-hour record of executed restarts.

    Pruning is lazy: every count and every record drops events that have aged
    out of the window, and dropped events are gone for good even if a later
    query passes an earlier ``now``.
    """

    def __init__(self, store: RestartHistoryStore, window: timedelta = RESTART_WINDOW) -> None:
        self.store = store
        self.window = window

    def count_recent(self, now: datetime) -> int:
        cutoff = now - self.window

        events = self.store.load()
        retained = [event for event in events if event >= cutoff]

        if len(retained) != len(events):
            self.store.replace(retained)

        return len(retained)

    def may_restart(self, now: datetime, max_per_hour: int) -> bool:
        if max_per_hour == 0:
            return True

        return self.count_recent(now) < max_per_hour

    def record(self, now: datetime) -> None:
        self.store.append(now)
        self.count_recent(now)
