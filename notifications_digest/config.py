"""Application configuration using pydantic-settings."""

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from notifications_digest.errors import ConfigurationError
from notifications_digest.models import DeliveryTarget, DirectMessageTarget, IssueCreationTarget


def _input(name: str, *env: str) -> AliasChoices:
    """Accept both the action input form and plain env var names."""
    return AliasChoices(f"INPUT_{name.upper()}", *env)


def parse_repository(value: str) -> tuple[str, str]:
    """Split ``owner/repo`` into its two parts."""
    owner, _, repo = value.strip().partition("/")
    if not owner or not repo or "/" in repo:
        raise ConfigurationError(f"Invalid repository '{value}', expected owner/repo")
    return owner, repo


class Settings(BaseSettings):
    """Run settings loaded from action inputs and environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    # GitHub
    github_token: str = Field(validation_alias=_input("github-token", "GITHUB_TOKEN"))
    github_repository: str = Field(default="", validation_alias="GITHUB_REPOSITORY")
    github_api_url: str = Field(
        default="https://api.github.com", validation_alias="GITHUB_API_URL"
    )

    # Inference
    ai_token: str = Field(validation_alias=_input("ai-token", "AI_TOKEN"))
    inference_base_url: str = Field(
        default="https://models.github.ai/inference",
        validation_alias="INFERENCE_BASE_URL",
    )

    # Slack
    slack_token: str = Field(default="", validation_alias=_input("slack-token", "SLACK_TOKEN"))
    slack_user_id: str = Field(
        default="", validation_alias=_input("slack-user-id", "SLACK_USER_ID")
    )

    # Time window
    hours_back: int = Field(default=24, gt=0, validation_alias=_input("hours-back", "HOURS_BACK"))

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="", validation_alias="LOG_FILE")

    @model_validator(mode="after")
    def _check_delivery(self) -> "Settings":
        if self.slack_token and not self.slack_user_id:
            raise ConfigurationError("slack-user-id is required when slack-token is provided")
        return self

    @property
    def slack_enabled(self) -> bool:
        """Check if the summary goes out as a Slack DM."""
        return bool(self.slack_token)

    @property
    def delivery_target(self) -> DeliveryTarget:
        """The single delivery variant for this run.

        Raises:
            ConfigurationError: If issue delivery has no ``owner/repo`` to post to
        """
        if self.slack_enabled:
            return DirectMessageTarget(token=self.slack_token, recipient_id=self.slack_user_id)
        owner, repo = parse_repository(self.github_repository)
        return IssueCreationTarget(token=self.github_token, owner=owner, repo=repo)


def get_settings(**overrides) -> Settings:
    """Load settings from the environment, with optional explicit overrides."""
    return Settings(**overrides)
