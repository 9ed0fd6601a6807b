class NotificationDeliveryError(Exception):
    pass
