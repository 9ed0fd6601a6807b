import asyncio
import signal
import socket
from typing import Optional

import httpx
import structlog
from docker.errors import DockerException

from core.domain.monitor_config import MonitorConfig
from core.domain.restart_ledger import RestartLedger
from core.exceptions.configuration_error import ConfigurationError
from core.port.cancellation_token import CancellationToken
from core.port.clock import Clock
from core.port.container_controller import ContainerController
from core.port.notifier import Notifier
from core.port.restart_history_store import RestartHistoryStore
from infra.adapter.asyncio_cancellation_token import AsyncioCancellationToken
from infra.adapter.docker_container_controller import get_docker_container_controller
from infra.adapter.file_restart_history_store import FileRestartHistoryStore
from infra.adapter.httpx_health_probe import HttpxHealthProbe
from infra.adapter.memory_restart_history_store import MemoryRestartHistoryStore
from infra.adapter.null_notifier import NullNotifier
from infra.adapter.system_clock import SystemClock
from infra.adapter.webhook_notifier import WebhookNotifier
from infra.config.config import Config, load_config
from infra.logging.config import configure_logging
from infra.services.monitor_service import MonitorService
from use_cases.container.restart_container_use_case import RestartContainerUseCase
from use_cases.notification.send_notification_use_case import SendNotificationUseCase

logger = structlog.stdlib.get_logger(__name__)

BANNER_RULE = "=" * 60


def create_restart_history_store(history_file: Optional[str]) -> RestartHistoryStore:
    if history_file:
        return FileRestartHistoryStore(history_file)

    return MemoryRestartHistoryStore()


def create_notifier(config: Config, http_client: httpx.AsyncClient) -> Notifier:
    if config.NOTIFY_WEBHOOK:
        return WebhookNotifier(http_client, config.NOTIFY_WEBHOOK, timeout_seconds=config.NOTIFY_TIMEOUT)

    return NullNotifier()


def create_container_controller() -> ContainerController:
    try:
        return get_docker_container_controller()
    except DockerException as e:
        raise ConfigurationError([f"docker is required but not reachable: {e}"]) from e


def create_monitor_service(
    config: Config,
    monitor_config: MonitorConfig,
    http_client: httpx.AsyncClient,
    container_controller: ContainerController,
    cancellation_token: CancellationToken,
    clock: Optional[Clock] = None,
    hostname: Optional[str] = None,
) -> MonitorService:
    clock = clock or SystemClock()

    send_notification_use_case = SendNotificationUseCase(
        notifier=create_notifier(config, http_client),
        clock=clock,
        container=monitor_config.container_name,
        url=monitor_config.target_url,
        hostname=hostname or socket.gethostname(),
    )

    return MonitorService(
        config=monitor_config,
        probe=HttpxHealthProbe(http_client),
        ledger=RestartLedger(create_restart_history_store(config.RESTART_HISTORY_FILE)),
        clock=clock,
        cancellation_token=cancellation_token,
        restart_container_use_case=RestartContainerUseCase(container_controller),
        send_notification_use_case=send_notification_use_case,
    )


def log_startup_banner(config: Config) -> None:
    logger.info(BANNER_RULE)
    logger.info(f"  Tunnel Monitor v{config.VERSION}")
    logger.info(BANNER_RULE)
    logger.info("Configuration:")
    logger.info(f"  URL to monitor: {config.MONITOR_URL}")
    logger.info(f"  Container name: {config.CONTAINER_NAME}")
    logger.info(f"  Check interval: {config.CHECK_INTERVAL}s")
    logger.info(f"  Success codes: {','.join(str(code) for code in sorted(config.SUCCESS_CODES))}")
    logger.info(f"  Retry count: {config.RETRY_COUNT}")
    logger.info(f"  Max restarts/hour: {config.MAX_RESTARTS_PER_HOUR or 'unlimited'}")
    logger.info(f"  Notifications: {'webhook' if config.NOTIFY_WEBHOOK else 'disabled'}")
    logger.info(f"  Log level: {config.LOG_LEVEL}")
    logger.info(BANNER_RULE)


def _log_configuration_error(error: ConfigurationError) -> None:
    for message in error.errors:
        logger.error(message)

    logger.error(f"Configuration validation failed with {len(error.errors)} error(s)")


async def run_monitor(
    config: Config,
    monitor_config: MonitorConfig,
    container_controller: ContainerController,
    cancellation_token: Optional[CancellationToken] = None,
) -> None:
    cancellation_token = cancellation_token or AsyncioCancellationToken()

    loop = asyncio.get_running_loop()
    for signum in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(signum, cancellation_token.cancel)

    try:
        async with httpx.AsyncClient(follow_redirects=False) as http_client:
            service = create_monitor_service(
                config=config,
                monitor_config=monitor_config,
                http_client=http_client,
                container_controller=container_controller,
                cancellation_token=cancellation_token,
            )

            await service.run()
    finally:
        for signum in (signal.SIGTERM, signal.SIGINT):
            loop.remove_signal_handler(signum)


def main() -> int:
    try:
        config, monitor_config = load_config()
    except ConfigurationError as e:
        configure_logging(log_level="INFO", service_name="py-tunnel-monitor", environment="pro", json_logs=False)
        _log_configuration_error(e)
        return 1

    configure_logging(
        log_level=config.logging_level,
        service_name=config.APP_NAME,
        environment=config.ENVIRONMENT,
        json_logs=config.LOG_JSON_FORMAT,
        library_log_levels=config.LIBRARY_LOG_LEVELS,
        container=config.CONTAINER_NAME,
    )

    log_startup_banner(config)

    try:
        container_controller = create_container_controller()
    except ConfigurationError as e:
        _log_configuration_error(e)
        return 1

    logger.info("Configuration validated successfully")

    asyncio.run(run_monitor(config, monitor_config, container_controller))

    logger.info("Monitor stopped")
    return 0
