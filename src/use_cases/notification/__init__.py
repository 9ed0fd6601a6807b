from use_cases.notification.send_notification_use_case import SendNotificationUseCase

__all__ = [
    "SendNotificationUseCase",
]
