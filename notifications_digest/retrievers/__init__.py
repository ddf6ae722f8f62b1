"""Notification retrievers."""

from .github_notifications import PAGE_SIZE, NotificationRetriever

__all__ = ["NotificationRetriever", "PAGE_SIZE"]
