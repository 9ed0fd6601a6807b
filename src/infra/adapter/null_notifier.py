from core.domain.notification_event import NotificationEvent
from core.port.notifier import Notifier


class NullNotifier(Notifier):
    async def notify(self, event: NotificationEvent) -> None:
        return None
