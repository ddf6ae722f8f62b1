"""Tests for settings and delivery selection."""

import pytest
from pydantic import ValidationError

from notifications_digest.config import Settings, parse_repository
from notifications_digest.errors import ConfigurationError
from notifications_digest.models import DirectMessageTarget, IssueCreationTarget


def test_defaults(make_settings):
    settings = make_settings()
    assert settings.hours_back == 24
    assert settings.inference_base_url == "https://models.github.ai/inference"
    assert settings.slack_enabled is False


def test_issue_target_without_slack(make_settings):
    target = make_settings().delivery_target
    assert target == IssueCreationTarget(token="gh-token", owner="octo", repo="digest")


def test_direct_message_target_with_slack(make_settings):
    target = make_settings(slack_token="xoxb", slack_user_id="U123").delivery_target
    assert target == DirectMessageTarget(token="xoxb", recipient_id="U123")


def test_slack_token_without_user_id(make_settings):
    with pytest.raises(ConfigurationError, match="slack-user-id is required"):
        make_settings(slack_token="xoxb")


def test_issue_target_needs_repository(make_settings):
    """Test the repository is only required once issue delivery is selected."""
    settings = make_settings(github_repository="")
    with pytest.raises(ConfigurationError, match="expected owner/repo"):
        settings.delivery_target


def test_slack_target_does_not_need_repository(make_settings):
    settings = make_settings(github_repository="", slack_token="xoxb", slack_user_id="U1")
    assert isinstance(settings.delivery_target, DirectMessageTarget)


def test_missing_required_tokens():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, github_repository="octo/digest")


def test_hours_back_must_be_positive(make_settings):
    with pytest.raises(ValidationError):
        make_settings(hours_back=0)


def test_action_inputs_from_env(monkeypatch):
    """Test settings read the INPUT_* variables set by the Actions runner."""
    monkeypatch.setenv("INPUT_GITHUB-TOKEN", "gh-from-input")
    monkeypatch.setenv("INPUT_AI-TOKEN", "ai-from-input")
    monkeypatch.setenv("INPUT_SLACK-TOKEN", "")
    monkeypatch.setenv("INPUT_HOURS-BACK", "48")
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/digest")

    settings = Settings(_env_file=None)
    assert settings.github_token == "gh-from-input"
    assert settings.ai_token == "ai-from-input"
    assert settings.hours_back == 48
    assert settings.slack_enabled is False


def test_parse_repository():
    assert parse_repository("octo/digest") == ("octo", "digest")
    for bad in ("", "octo", "/digest", "octo/", "a/b/c"):
        with pytest.raises(ConfigurationError):
            parse_repository(bad)
