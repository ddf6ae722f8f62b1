"""Notification services for delivering summaries."""

import httpx

from notifications_digest.models import DeliveryTarget, DirectMessageTarget, IssueCreationTarget

from .base import ALL_CAUGHT_UP, Notifier, message_body, summary_title
from .github_issue_notifier import ISSUE_LABELS, GitHubIssueNotifier
from .slack_notifier import SlackNotifier


def build_notifier(
    target: DeliveryTarget,
    github_api_url: str = "https://api.github.com",
    client: httpx.AsyncClient | None = None,
) -> Notifier:
    """Create the notifier for the run's delivery variant."""
    if isinstance(target, DirectMessageTarget):
        return SlackNotifier(token=target.token, user_id=target.recipient_id, client=client)
    if isinstance(target, IssueCreationTarget):
        return GitHubIssueNotifier(
            token=target.token,
            owner=target.owner,
            repo=target.repo,
            api_url=github_api_url,
            client=client,
        )
    raise TypeError(f"Unsupported delivery target: {target!r}")


__all__ = [
    "ALL_CAUGHT_UP",
    "GitHubIssueNotifier",
    "ISSUE_LABELS",
    "Notifier",
    "SlackNotifier",
    "build_notifier",
    "message_body",
    "summary_title",
]
