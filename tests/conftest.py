"""Shared fixtures for digest tests."""

from types import SimpleNamespace

import httpx
from loguru import logger
import pytest

from notifications_digest.analyzers import PromptMessage, PromptTemplate, StaticTemplateProvider
from notifications_digest.config import Settings

ENV_VARS = [
    "GITHUB_TOKEN",
    "GITHUB_REPOSITORY",
    "GITHUB_API_URL",
    "GITHUB_OUTPUT",
    "AI_TOKEN",
    "SLACK_TOKEN",
    "SLACK_USER_ID",
    "HOURS_BACK",
    "INFERENCE_BASE_URL",
    "LOG_FILE",
    "LOG_LEVEL",
    "INPUT_GITHUB-TOKEN",
    "INPUT_AI-TOKEN",
    "INPUT_SLACK-TOKEN",
    "INPUT_SLACK-USER-ID",
    "INPUT_HOURS-BACK",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the runner's own environment out of Settings."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        values = {
            "github_token": "gh-token",
            "ai_token": "ai-token",
            "github_repository": "octo/digest",
            "_env_file": None,
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def make_payload():
    """Build a notification as the REST API returns it."""

    def _make(i: int, title: str | None = None, reason: str = "mention") -> dict:
        return {
            "id": str(1000 + i),
            "unread": True,
            "reason": reason,
            "updated_at": f"2026-10-17T0{i % 10}:30:00Z",
            "subject": {
                "title": title or f"Fix flaky test {i}",
                "type": "PullRequest",
                "url": f"https://api.github.com/repos/octo/app/pulls/{i}",
            },
            "repository": {"id": 42, "full_name": "octo/app"},
        }

    return _make


@pytest.fixture
def template() -> PromptTemplate:
    return PromptTemplate(
        model="openai/gpt-4o-mini",
        messages=[
            PromptMessage(role="system", content="Summarize. {{formatInstruction}}"),
            PromptMessage(role="user", content="Notifications:\n{{notifications}}"),
        ],
    )


@pytest.fixture
def template_provider(template) -> StaticTemplateProvider:
    return StaticTemplateProvider(template)


class FakeChatClient:
    """Stands in for AsyncOpenAI; records every completion request."""

    def __init__(self, content: str | None = "Summary X", error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls: list[dict] = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    async def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_chat():
    return FakeChatClient


class RecordingOutputs:
    def __init__(self):
        self.values: dict[str, object] = {}

    def set_output(self, name: str, value: object) -> None:
        self.values[name] = value


@pytest.fixture
def outputs() -> RecordingOutputs:
    return RecordingOutputs()


@pytest.fixture
def mock_http():
    """AsyncClient backed by a handler; requests are recorded on ``client.requests``."""

    def _make(handler) -> httpx.AsyncClient:
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        client.requests = requests
        return client

    return _make


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks that commands attach to short-lived streams."""
    yield
    logger.remove()
