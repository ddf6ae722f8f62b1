"""Notification and run data models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class NotificationReason(str, Enum):
    """Why the user received a notification."""

    APPROVAL_REQUESTED = "approval_requested"
    ASSIGN = "assign"
    AUTHOR = "author"
    CI_ACTIVITY = "ci_activity"
    COMMENT = "comment"
    INVITATION = "invitation"
    MANUAL = "manual"
    MEMBER_FEATURE_REQUESTED = "member_feature_requested"
    MENTION = "mention"
    REVIEW_REQUESTED = "review_requested"
    SECURITY_ADVISORY_CREDIT = "security_advisory_credit"
    SECURITY_ALERT = "security_alert"
    STATE_CHANGE = "state_change"
    SUBSCRIBED = "subscribed"
    TEAM_MENTION = "team_mention"
    UNKNOWN = "unknown"


class Subject(BaseModel):
    """The thing a notification is about."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(..., description="Issue, PR or release title")
    kind: str = Field(..., alias="type", description="Subject type, e.g. PullRequest")


class Notification(BaseModel):
    """A single notification thread from the user's inbox."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Notification thread ID")
    subject: Subject
    source_repository: str = Field(..., alias="repository", description="owner/name")
    reason: NotificationReason
    reason_text: str = Field(default="", description="Reason exactly as sent upstream")
    updated_at: datetime = Field(..., description="Last update time")

    @model_validator(mode="before")
    @classmethod
    def _keep_raw_reason(cls, data):
        if isinstance(data, dict) and not data.get("reason_text"):
            reason = data.get("reason")
            raw = reason.value if isinstance(reason, NotificationReason) else str(reason or "")
            data = {**data, "reason_text": raw}
        return data

    @field_validator("source_repository", mode="before")
    @classmethod
    def _repository_full_name(cls, value):
        if isinstance(value, dict):
            return value.get("full_name", "")
        return value

    @field_validator("reason", mode="before")
    @classmethod
    def _known_reason(cls, value):
        if isinstance(value, NotificationReason):
            return value
        try:
            return NotificationReason(value)
        except ValueError:
            return NotificationReason.UNKNOWN

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value):
        return str(value)


class RunOutputs(BaseModel):
    """Values published for the calling workflow."""

    notification_count: int = Field(default=0, ge=0)
    summary: str = Field(default="", description="LLM-generated summary")


class DeliveryAck(BaseModel):
    """Acknowledgment returned by a notifier after its single write."""

    channel: str = Field(..., description="Delivery channel name")
    reference: str = Field(..., description="Slack message ts or issue number")
    url: str | None = Field(default=None)
