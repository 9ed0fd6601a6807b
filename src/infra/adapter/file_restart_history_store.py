import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import structlog

from core.port.restart_history_store import RestartHistoryStore

logger = structlog.stdlib.get_logger(__name__)


class FileRestartHistoryStore(RestartHistoryStore):
    """Restart timestamps as epoch seconds, one per line.

    Every write goes to a temporary file in the same directory which then
    replaces the log, so readers never observe a partial file. A missing
    file is an empty history.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[datetime]:
        try:
            lines = self.path.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            return []

        events = []
        for line in lines:
            value = line.strip()

            if not value.isdigit():
                if value:
                    logger.debug(f"Ignoring malformed restart history line: {value!r}")
                continue

            events.append(datetime.fromtimestamp(int(value), tz=timezone.utc))

        return sorted(events)

    def append(self, restarted_at: datetime) -> None:
        self.replace(self.load() + [restarted_at])

    def replace(self, events: list[datetime]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = "".join(f"{int(event.timestamp())}\n" for event in sorted(events))

        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                tmp_file.write(content)

            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
