import asyncio
from datetime import datetime

import structlog

from core.domain.monitor_config import MonitorConfig
from core.domain.notification_status import NotificationStatus
from core.domain.probe_result import ProbeResult
from core.domain.restart_ledger import RestartLedger
from core.domain.run_state import MonitorPhase, RunState
from core.exceptions.container_not_found_error import ContainerNotFoundError
from core.exceptions.restart_execution_error import RestartExecutionError
from core.port.cancellation_token import CancellationToken
from core.port.clock import Clock
from core.port.health_probe import HealthProbe
from infra.utils.formatters import format_duration
from use_cases.container.restart_container_use_case import RestartContainerUseCase
from use_cases.notification.send_notification_use_case import SendNotificationUseCase

logger = structlog.stdlib.get_logger(__name__)

LIMIT_COOLDOWN_SECONDS = 300
STATUS_LOG_EVERY_CHECKS = 10
STOP_NOTIFICATION_TIMEOUT_SECONDS = 5.0


class MonitorService:
    def __init__(
        self,
        config: MonitorConfig,
        probe: HealthProbe,
        ledger: RestartLedger,
        clock: Clock,
        cancellation_token: CancellationToken,
        restart_container_use_case: RestartContainerUseCase,
        send_notification_use_case: SendNotificationUseCase,
    ):
        self.config = config
        self.probe = probe
        self.ledger = ledger
        self.clock = clock
        self.cancellation_token = cancellation_token

        self.restart_container_use_case = restart_container_use_case
        self.send_notification_use_case = send_notification_use_case

        self.state = RunState()
        self._started_at = clock.now()

    async def run(self) -> None:
        """Probe on a fixed cadence until the cancellation token fires."""
        logger.info("Starting monitoring loop...")
        self._started_at = self.clock.now()

        while not self.cancellation_token.is_cancelled:
            pauses = await self.run_tick()

            for seconds in pauses:
                if await self.cancellation_token.sleep(seconds):
                    break

        logger.info("Received shutdown signal, cleaning up...")
        await self._notify_stopped()

    async def run_tick(self) -> tuple[float, ...]:
        """Run one probe/decide step and return the pauses to apply before the next one."""
        self.state.total_checks += 1
        pauses: tuple[float, ...] = (self.config.check_interval_seconds,)

        result = await self._probe()
        outcome = result.classify(self.config.success_codes)

        logger.debug(f"HTTP response code: {result.status_code or '000'}", outcome=outcome.value)

        if outcome.is_healthy:
            await self._handle_healthy()
        else:
            self.state.consecutive_failures += 1
            self.state.phase = MonitorPhase.STREAKING

            logger.warning(
                f"Health check failed (attempt {self.state.consecutive_failures}/{self.config.retry_count})",
                status_code=result.status_code,
                error=result.error_message,
            )

            if self.state.consecutive_failures >= self.config.retry_count:
                pauses = await self._handle_threshold_crossed()
                self.state.reset_streak()

        if self.state.total_checks % STATUS_LOG_EVERY_CHECKS == 0:
            uptime = max(0.0, (self.clock.now() - self._started_at).total_seconds())
            logger.debug(
                f"Status: {self.state.total_checks} checks performed, "
                f"{self.state.total_restarts} restarts, uptime: {format_duration(uptime)}"
            )

        return pauses

    async def _probe(self) -> ProbeResult:
        logger.debug(f"Checking health: {self.config.target_url}")

        try:
            return await self.probe.probe(
                self.config.target_url,
                self.config.connect_timeout_seconds,
                self.config.max_timeout_seconds,
            )
        except Exception as e:
            logger.exception(f"Unexpected error probing '{self.config.target_url}': {e}")
            return ProbeResult.transport_failure(str(e))

    async def _handle_healthy(self) -> None:
        if self.state.consecutive_failures > 0:
            logger.info(f"Service recovered after {self.state.consecutive_failures} consecutive failures")
            await self.send_notification_use_case.execute(NotificationStatus.RECOVERED, "Service is now healthy")
        else:
            logger.info("Service is healthy (HTTP check passed)")

        self.state.reset_streak()

    async def _handle_threshold_crossed(self) -> tuple[float, ...]:
        logger.error(f"Service is unhealthy after {self.state.consecutive_failures} consecutive failures")

        now = self.clock.now()
        max_per_hour = self.config.max_restarts_per_hour

        if not self.ledger.may_restart(now, max_per_hour):
            logger.error(
                f"Restart limit reached: {self.ledger.count_recent(now)} restarts in the last hour "
                f"(max: {max_per_hour})"
            )
            await self.send_notification_use_case.execute(
                NotificationStatus.CRITICAL,
                "Restart limit exceeded - manual intervention required",
            )
            logger.error("Restart limit exceeded. Pausing automatic restarts for safety.")

            self.state.phase = MonitorPhase.COOLDOWN
            return (LIMIT_COOLDOWN_SECONDS, self.config.check_interval_seconds)

        await self.send_notification_use_case.execute(
            NotificationStatus.UNHEALTHY,
            "Service is down, attempting restart",
        )
        self.state.phase = MonitorPhase.RESTARTING

        if not await self._restart(now):
            await self.send_notification_use_case.execute(NotificationStatus.CRITICAL, "Failed to restart container")
            return (self.config.check_interval_seconds,)

        self.state.total_restarts += 1
        logger.info(f"Container restart initiated (total restarts: {self.state.total_restarts})")
        logger.info(f"Waiting {self.config.restart_delay_seconds}s for service to stabilize...")

        return (self.config.restart_delay_seconds,)

    async def _restart(self, issued_at: datetime) -> bool:
        container_name = self.config.container_name

        try:
            await self.restart_container_use_case.execute(container_name)
        except (ContainerNotFoundError, RestartExecutionError) as e:
            logger.error(str(e))
            return False
        except Exception as e:
            logger.exception(f"Unexpected error restarting container '{container_name}': {e}")
            return False

        self.ledger.record(issued_at)
        return True

    async def _notify_stopped(self) -> None:
        try:
            await asyncio.wait_for(
                self.send_notification_use_case.execute(NotificationStatus.STOPPED, "Monitor stopped"),
                timeout=STOP_NOTIFICATION_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError:
            logger.warning("Timed out sending stop notification")
