"""Shared message content and the notifier interface."""

from datetime import date, datetime, timezone
from typing import Protocol

from notifications_digest.models import DeliveryAck

SUMMARY_TITLE = "Daily Notifications Summary"
ALL_CAUGHT_UP = "✅ No new notifications in the last 24 hours. All caught up!"


def summary_title(today: date | None = None) -> str:
    """Dated title used for both the Slack header and the issue title."""
    today = today or datetime.now(timezone.utc).date()
    return f"{SUMMARY_TITLE} — {today.isoformat()}"


def message_body(summary: str, has_notifications: bool) -> str:
    """The summary, or the all-caught-up sentinel when there was nothing to summarize."""
    return summary if has_notifications else ALL_CAUGHT_UP


class Notifier(Protocol):
    """A delivery channel that performs exactly one external write per call."""

    async def send_summary(self, summary: str, has_notifications: bool) -> DeliveryAck: ...
