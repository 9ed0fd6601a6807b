import structlog

from core.domain.notification_event import NotificationEvent
from core.domain.notification_status import NotificationStatus
from core.exceptions.notification_delivery_error import NotificationDeliveryError
from core.port.clock import Clock
from core.port.notifier import Notifier

logger = structlog.stdlib.get_logger(__name__)


class SendNotificationUseCase:
    """Fire-and-forget delivery: failures are logged and never re-raised."""

    def __init__(self, notifier: Notifier, clock: Clock, container: str, url: str, hostname: str) -> None:
        self.notifier = notifier
        self.clock = clock

        self.container = container
        self.url = url
        self.hostname = hostname

    async def execute(self, status: NotificationStatus, message: str) -> NotificationEvent:
        event = NotificationEvent(
            status=status,
            message=message,
            container=self.container,
            url=self.url,
            timestamp=self.clock.now(),
            hostname=self.hostname,
        )

        logger.debug(f"Sending '{status.value}' notification")

        try:
            await self.notifier.notify(event)
        except NotificationDeliveryError as e:
            logger.warning(f"Failed to send notification: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error sending '{status.value}' notification: {e}")

        return event
