"""GitHub notification retriever using the REST API."""

from datetime import datetime, timedelta, timezone

import httpx
from loguru import logger
from pydantic import ValidationError

from notifications_digest.errors import RetrievalError
from notifications_digest.http_client import github_headers, http_client
from notifications_digest.models import Notification

PAGE_SIZE = 50


class NotificationRetriever:
    """Fetch the authenticated user's notifications for a time window."""

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.github.com",
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the retriever.

        Args:
            token: GitHub token with the notifications scope
            api_url: Base URL of the GitHub REST API
            client: Optional shared HTTP client (owned by the caller)

        Note:
            Only the first page (50 notifications) is fetched. Threads beyond
            that in the same window are not included in the digest.
        """
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.client = client

    @staticmethod
    def cutoff(hours_back: float, now: datetime | None = None) -> datetime:
        """Start of the time window."""
        now = now or datetime.now(timezone.utc)
        return now - timedelta(hours=hours_back)

    async def fetch(self, hours_back: float) -> list[Notification]:
        """Fetch notifications updated within the last ``hours_back`` hours.

        Returns:
            Notifications in the order the API returned them (newest first)

        Raises:
            RetrievalError: On any transport, auth or payload error
        """
        since = self.cutoff(hours_back)
        params = {
            "since": since.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "per_page": PAGE_SIZE,
        }
        logger.debug(f"Requesting notifications since {params['since']}")

        try:
            async with http_client(self.client) as client:
                response = await client.get(
                    f"{self.api_url}/notifications",
                    params=params,
                    headers=github_headers(self.token),
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise RetrievalError(
                f"Failed to fetch notifications: HTTP {e.response.status_code} {e.response.text}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise RetrievalError(f"Failed to fetch notifications: {e}") from e

        if not isinstance(payload, list):
            raise RetrievalError("Failed to fetch notifications: unexpected response payload")

        try:
            notifications = [Notification.model_validate(item) for item in payload]
        except ValidationError as e:
            raise RetrievalError(f"Failed to fetch notifications: malformed notification ({e})") from e

        logger.info(f"Fetched {len(notifications)} notifications")
        return notifications
