from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ProbeOutcome(str, Enum):
    HEALTHY = "HEALTHY"
    UNHEALTHY = "UNHEALTHY"
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"

    @property
    def is_healthy(self) -> bool:
        return self is ProbeOutcome.HEALTHY


@dataclass(frozen=True)
class ProbeResult:
    status_code: Optional[int] = None
    error_message: Optional[str] = None

    @classmethod
    def transport_failure(cls, error_message: str) -> "ProbeResult":
        return cls(status_code=None, error_message=error_message)

    def classify(self, success_codes: frozenset[int]) -> ProbeOutcome:
        if self.status_code is None:
            return ProbeOutcome.TRANSPORT_FAILURE

        if self.status_code in success_codes:
            return ProbeOutcome.HEALTHY

        return ProbeOutcome.UNHEALTHY
