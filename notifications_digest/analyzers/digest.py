"""Render notifications into a digest for the summarizer."""

from notifications_digest.models import Notification

NO_NOTIFICATIONS = "No new notifications in the specified time period."


def _one_line(text: str) -> str:
    return " ".join(text.split())


def format_notification(notification: Notification) -> str:
    """Render a single notification as one bullet line."""
    subject = notification.subject
    return (
        f"- **{_one_line(subject.title)}** ({subject.kind}) in {notification.source_repository}"
        f" | Reason: {notification.reason_text or notification.reason.value}"
        f" | Updated: {notification.updated_at.isoformat()}"
    )


def format_notifications(notifications: list[Notification]) -> str:
    """Format notifications into a string for LLM summarization.

    One bullet per notification, in input order. Pure: the same sequence
    always renders to the same text.
    """
    if not notifications:
        return NO_NOTIFICATIONS
    return "\n".join(format_notification(n) for n in notifications)
