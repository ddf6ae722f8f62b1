"""Slack direct-message notification service."""

from datetime import date

import httpx
from loguru import logger

from notifications_digest.errors import DeliveryError
from notifications_digest.http_client import http_client
from notifications_digest.models import DeliveryAck
from notifications_digest.notifiers.base import message_body, summary_title

SLACK_POST_MESSAGE_URL = "https://slack.com/api/chat.postMessage"


class SlackNotifier:
    """Send the summary to a user via Slack DM."""

    def __init__(
        self,
        token: str,
        user_id: str,
        client: httpx.AsyncClient | None = None,
        url: str = SLACK_POST_MESSAGE_URL,
    ):
        """Initialize Slack notifier."""
        self.token = token
        self.user_id = user_id
        self.client = client
        self.url = url

    def build_payload(self, summary: str, has_notifications: bool, today: date | None = None) -> dict:
        """Block Kit payload: a dated header and one mrkdwn section."""
        title = summary_title(today)
        return {
            "channel": self.user_id,
            "text": title,
            "blocks": [
                {
                    "type": "header",
                    "text": {"type": "plain_text", "text": title},
                },
                {
                    "type": "section",
                    "text": {"type": "mrkdwn", "text": message_body(summary, has_notifications)},
                },
            ],
        }

    async def send_summary(self, summary: str, has_notifications: bool) -> DeliveryAck:
        """Send the summary via Slack.

        Slack answers HTTP 200 even when a call fails, so the ``ok`` flag in
        the body is checked as well.

        Raises:
            DeliveryError: On transport failure or an ``ok: false`` response
        """
        payload = self.build_payload(summary, has_notifications)

        try:
            async with http_client(self.client) as client:
                response = await client.post(
                    self.url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.token}"},
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise DeliveryError(f"Failed to send Slack message: {e}") from e

        if not isinstance(data, dict):
            raise DeliveryError("Failed to send Slack message: unexpected response payload")

        if not data.get("ok"):
            raise DeliveryError(
                f"Failed to send Slack message: Slack API error: {data.get('error', 'unknown_error')}"
            )

        logger.info(f"Slack message sent to {self.user_id}")
        return DeliveryAck(channel="slack", reference=str(data.get("ts", "")))
