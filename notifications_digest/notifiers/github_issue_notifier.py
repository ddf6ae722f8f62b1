"""GitHub issue notification service."""

import httpx
from loguru import logger

from notifications_digest.errors import DeliveryError
from notifications_digest.http_client import github_headers, http_client
from notifications_digest.models import DeliveryAck
from notifications_digest.notifiers.base import message_body, summary_title

ISSUE_LABELS = ["automated", "notifications", "summary"]


class GitHubIssueNotifier:
    """Publish the summary as an issue in the workflow's repository."""

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        api_url: str = "https://api.github.com",
        client: httpx.AsyncClient | None = None,
    ):
        self.token = token
        self.owner = owner
        self.repo = repo
        self.api_url = api_url.rstrip("/")
        self.client = client

    async def send_summary(self, summary: str, has_notifications: bool) -> DeliveryAck:
        """Create the summary issue.

        Returns:
            Ack whose reference is the new issue number

        Raises:
            DeliveryError: If the issue cannot be created
        """
        issue = {
            "title": summary_title(),
            "body": message_body(summary, has_notifications),
            "labels": ISSUE_LABELS,
        }

        try:
            async with http_client(self.client) as client:
                response = await client.post(
                    f"{self.api_url}/repos/{self.owner}/{self.repo}/issues",
                    json=issue,
                    headers=github_headers(self.token),
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise DeliveryError(
                f"Failed to create GitHub issue: HTTP {e.response.status_code} {e.response.text}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise DeliveryError(f"Failed to create GitHub issue: {e}") from e

        if not isinstance(data, dict):
            raise DeliveryError("Failed to create GitHub issue: unexpected response payload")

        number = data.get("number")
        if number is None:
            raise DeliveryError("Failed to create GitHub issue: response has no issue number")

        logger.info(f"Created issue #{number} in {self.owner}/{self.repo}")
        return DeliveryAck(channel="github-issue", reference=str(number), url=data.get("html_url"))
