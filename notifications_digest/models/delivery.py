"""Delivery target variants selected once per run."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Destination(str, Enum):
    """Markdown dialect the summary is written for."""

    SLACK = "slack"
    MARKDOWN = "markdown"


class DirectMessageTarget(BaseModel):
    """Deliver the summary as a Slack direct message."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., min_length=1)
    recipient_id: str = Field(..., min_length=1)

    @property
    def destination(self) -> Destination:
        return Destination.SLACK


class IssueCreationTarget(BaseModel):
    """Deliver the summary as an issue in the run's own repository."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., min_length=1)
    owner: str = Field(..., min_length=1)
    repo: str = Field(..., min_length=1)

    @property
    def destination(self) -> Destination:
        return Destination.MARKDOWN


DeliveryTarget = DirectMessageTarget | IssueCreationTarget
