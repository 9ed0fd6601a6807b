import httpx

from core.domain.notification_event import NotificationEvent
from core.exceptions.notification_delivery_error import NotificationDeliveryError
from core.port.notifier import Notifier


class WebhookNotifier(Notifier):
    def __init__(self, http_client: httpx.AsyncClient, webhook_url: str, timeout_seconds: float = 10.0) -> None:
        self.http_client = http_client
        self.webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds

    async def notify(self, event: NotificationEvent) -> None:
        try:
            response = await self.http_client.post(
                self.webhook_url,
                json=event.to_payload(),
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise NotificationDeliveryError(f"Webhook delivery of '{event.status.value}' failed: {e}") from e
