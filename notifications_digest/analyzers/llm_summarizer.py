"""LLM-based notification summarizer using an OpenAI-compatible endpoint."""

import yaml
from loguru import logger
from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from notifications_digest.analyzers.prompt import TemplateProvider, YamlTemplateProvider
from notifications_digest.errors import SummaryError
from notifications_digest.models import Destination

MAX_TOKENS = 1000

FORMAT_INSTRUCTIONS = {
    Destination.SLACK: "Format the summary for Slack messaging (use Slack markdown format).",
    Destination.MARKDOWN: "Format the summary in GitHub markdown with clear sections and bullet points.",
}


class LLMSummarizer:
    """Summarizer that condenses a notification digest with a chat model."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://models.github.ai/inference",
        template_provider: TemplateProvider | None = None,
        client: AsyncOpenAI | None = None,
        max_tokens: int = MAX_TOKENS,
    ):
        """Initialize the summarizer.

        Args:
            api_key: Token for the inference service
            base_url: Base URL of the chat-completions API
            template_provider: Source of the prompt template (default: bundled YAML)
            client: Preconfigured client, mainly for tests
            max_tokens: Upper bound on generated tokens
        """
        # Retries are off: a failed call fails the run.
        self.client = client or AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        self.template_provider = template_provider or YamlTemplateProvider()
        self.max_tokens = max_tokens

    async def summarize(self, digest: str, destination: Destination) -> str:
        """Generate a natural-language summary of the digest.

        Args:
            digest: Formatted notifications (see ``format_notifications``)
            destination: Markdown dialect the summary will be rendered in

        Returns:
            Summary text from the first returned choice

        Raises:
            SummaryError: If the template cannot be loaded or inference fails
        """
        try:
            template = self.template_provider.load()
        except (OSError, yaml.YAMLError, ValidationError) as e:
            raise SummaryError(f"Failed to load prompt template: {e}") from e

        messages = template.render(FORMAT_INSTRUCTIONS[destination], digest)

        try:
            response = await self.client.chat.completions.create(
                model=template.model,
                messages=messages,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            raise SummaryError(f"Failed to generate AI summary: {e}") from e

        logger.debug(f"Raw response: {response}")
        if not response.choices or not response.choices[0].message.content:
            raise SummaryError("Failed to generate AI summary: response contained no content")

        summary = response.choices[0].message.content
        logger.info(f"Summary text length: {len(summary)}")
        return summary
