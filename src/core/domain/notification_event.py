from dataclasses import dataclass
from datetime import datetime, timezone

from core.domain.notification_status import NotificationStatus

RFC3339_UTC_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class NotificationEvent:
    status: NotificationStatus
    message: str
    container: str
    url: str
    timestamp: datetime
    hostname: str

    def to_payload(self) -> dict[str, str]:
        return {
            "status": self.status.value,
            "message": self.message,
            "container": self.container,
            "url": self.url,
            "timestamp": self.timestamp.astimezone(timezone.utc).strftime(RFC3339_UTC_FORMAT),
            "hostname": self.hostname,
        }
