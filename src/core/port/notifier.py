from abc import ABC, abstractmethod

from core.domain.notification_event import NotificationEvent


class Notifier(ABC):
    @abstractmethod
    async def notify(self, event: NotificationEvent) -> None:
        raise NotImplementedError
