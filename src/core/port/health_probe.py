from abc import ABC, abstractmethod

from core.domain.probe_result import ProbeResult


class HealthProbe(ABC):
    @abstractmethod
    async def probe(self, url: str, connect_timeout: float, max_timeout: float) -> ProbeResult:
        """Perform a single check. Transport errors are returned, never raised."""
        raise NotImplementedError
