from collections import deque
from datetime import datetime, timedelta, timezone
from typing import Iterable

from core.domain.notification_event import NotificationEvent
from core.domain.notification_status import NotificationStatus
from core.domain.probe_result import ProbeResult
from core.exceptions.container_not_found_error import ContainerNotFoundError
from core.exceptions.notification_delivery_error import NotificationDeliveryError
from core.exceptions.restart_execution_error import RestartExecutionError
from core.port.cancellation_token import CancellationToken
from core.port.clock import Clock
from core.port.container_controller import ContainerController
from core.port.health_probe import HealthProbe
from core.port.notifier import Notifier

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

HEALTHY = ProbeResult(status_code=200)
UNHEALTHY = ProbeResult(status_code=503)
TRANSPORT_FAILURE = ProbeResult.transport_failure("connection refused")


class FakeClock(Clock):
    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


class FakeCancellationToken(CancellationToken):
    """Records pauses, advances the fake clock, and cancels after ``max_sleeps`` pauses."""

    def __init__(self, clock: FakeClock | None = None, max_sleeps: int | None = None) -> None:
        self.clock = clock
        self.max_sleeps = max_sleeps
        self.sleeps: list[float] = []
        self._cancelled = False

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    async def sleep(self, seconds: float) -> bool:
        if self._cancelled:
            return True

        self.sleeps.append(seconds)

        if self.clock is not None:
            self.clock.advance(seconds)

        if self.max_sleeps is not None and len(self.sleeps) >= self.max_sleeps:
            self._cancelled = True

        return self._cancelled


class FakeHealthProbe(HealthProbe):
    def __init__(self, results: Iterable[ProbeResult] = (), default: ProbeResult = HEALTHY) -> None:
        self.results = deque(results)
        self.default = default
        self.calls: list[tuple[str, float, float]] = []

    def push(self, *results: ProbeResult) -> None:
        self.results.extend(results)

    async def probe(self, url: str, connect_timeout: float, max_timeout: float) -> ProbeResult:
        self.calls.append((url, connect_timeout, max_timeout))

        if self.results:
            return self.results.popleft()

        return self.default


class RaisingHealthProbe(HealthProbe):
    async def probe(self, url: str, connect_timeout: float, max_timeout: float) -> ProbeResult:
        raise RuntimeError("probe exploded")


class FakeContainerController(ContainerController):
    def __init__(self, containers: Iterable[str] = (), fail_restart: bool = False) -> None:
        self.containers = set(containers)
        self.fail_restart = fail_restart
        self.restart_calls: list[str] = []

    async def exists(self, name: str) -> bool:
        return name in self.containers

    async def restart(self, name: str) -> None:
        self.restart_calls.append(name)

        if name not in self.containers:
            raise ContainerNotFoundError(name)

        if self.fail_restart:
            raise RestartExecutionError(name, "daemon refused")


class FakeNotifier(Notifier):
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.events: list[NotificationEvent] = []

    async def notify(self, event: NotificationEvent) -> None:
        self.events.append(event)

        if self.fail:
            raise NotificationDeliveryError("webhook unreachable")

    @property
    def statuses(self) -> list[NotificationStatus]:
        return [event.status for event in self.events]


class BrokenNotifier(Notifier):
    """Raises an untyped error on every delivery."""

    def __init__(self) -> None:
        self.events: list[NotificationEvent] = []

    async def notify(self, event: NotificationEvent) -> None:
        self.events.append(event)
        raise RuntimeError("notifier exploded")

    @property
    def statuses(self) -> list[NotificationStatus]:
        return [event.status for event in self.events]
