"""Data models for the notification digest."""

from .delivery import DeliveryTarget, Destination, DirectMessageTarget, IssueCreationTarget
from .notification import (
    DeliveryAck,
    Notification,
    NotificationReason,
    RunOutputs,
    Subject,
)

__all__ = [
    "DeliveryAck",
    "DeliveryTarget",
    "Destination",
    "DirectMessageTarget",
    "IssueCreationTarget",
    "Notification",
    "NotificationReason",
    "RunOutputs",
    "Subject",
]
