from enum import Enum


class NotificationStatus(str, Enum):
    UNHEALTHY = "unhealthy"
    RECOVERED = "recovered"
    CRITICAL = "critical"
    STOPPED = "stopped"
