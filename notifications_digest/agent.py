"""Notification digest agent that orchestrates all components."""

import httpx
from loguru import logger

from notifications_digest.actions import ActionsOutputWriter, OutputWriter
from notifications_digest.analyzers import LLMSummarizer, format_notifications
from notifications_digest.config import Settings
from notifications_digest.models import DeliveryAck, Destination, RunOutputs
from notifications_digest.notifiers import Notifier, build_notifier
from notifications_digest.retrievers import NotificationRetriever


class NotificationDigestAgent:
    """Fetch, summarize and deliver the user's pending notifications."""

    def __init__(
        self,
        settings: Settings,
        retriever: NotificationRetriever | None = None,
        summarizer: LLMSummarizer | None = None,
        notifier: Notifier | None = None,
        outputs: OutputWriter | None = None,
        http: httpx.AsyncClient | None = None,
    ):
        """Initialize the agent with settings.

        Components not passed in are built from ``settings``. The delivery
        variant is fixed here, once per run.
        """
        self.settings = settings
        self.target = settings.delivery_target
        self.retriever = retriever or NotificationRetriever(
            token=settings.github_token,
            api_url=settings.github_api_url,
            client=http,
        )
        self.summarizer = summarizer or LLMSummarizer(
            api_key=settings.ai_token,
            base_url=settings.inference_base_url,
        )
        self.notifier = notifier or build_notifier(
            self.target, github_api_url=settings.github_api_url, client=http
        )
        self.outputs = outputs or ActionsOutputWriter()
        self.last_ack: DeliveryAck | None = None

        logger.info(f"Delivery via {'Slack DM' if settings.slack_enabled else 'GitHub issue'}")

    @property
    def destination(self) -> Destination:
        return self.target.destination

    async def run(self, hours_back: int | None = None) -> RunOutputs:
        """Run the digest pipeline once.

        This is the main job that:
        1. Fetches notifications updated in the time window
        2. Formats them into a digest
        3. Summarizes the digest with the LLM (only if there is anything)
        4. Delivers the summary, or the all-caught-up message

        Outputs are published before delivery, so they reflect the pipeline
        even when delivery fails. Stage errors propagate unchanged.

        Returns:
            RunOutputs with the notification count and summary
        """
        hours_back = hours_back or self.settings.hours_back

        logger.info("Fetching recent notifications...")
        notifications = await self.retriever.fetch(hours_back)
        count = len(notifications)
        has_notifications = count > 0

        logger.info(f"Found {count} notifications")
        self.outputs.set_output("notification-count", count)

        digest = format_notifications(notifications)
        logger.debug(f"Digest:\n{digest}")

        summary = ""
        if has_notifications:
            logger.info("Generating AI summary...")
            summary = await self.summarizer.summarize(digest, self.destination)

        self.outputs.set_output("summary", summary)
        result = RunOutputs(notification_count=count, summary=summary)

        if self.settings.slack_enabled:
            logger.info("Sending Slack DM...")
        else:
            logger.info("Creating GitHub issue...")
        self.last_ack = await self.notifier.send_summary(summary, has_notifications)

        logger.info(f"✅ Processed {count} notifications")
        return result
