from dataclasses import dataclass
from enum import Enum


class MonitorPhase(str, Enum):
    CHECKING = "CHECKING"
    STREAKING = "STREAKING"
    RESTARTING = "RESTARTING"
    COOLDOWN = "COOLDOWN"


@dataclass
class RunState:
    """Mutable loop state, owned by a single MonitorService."""

    consecutive_failures: int = 0
    total_checks: int = 0
    total_restarts: int = 0
    phase: MonitorPhase = MonitorPhase.CHECKING

    def reset_streak(self) -> None:
        self.consecutive_failures = 0
        self.phase = MonitorPhase.CHECKING
