"""Tests for digest formatting."""

from notifications_digest.analyzers import NO_NOTIFICATIONS, format_notifications
from notifications_digest.models import Notification, NotificationReason


def _notifications(make_payload, count):
    return [Notification.model_validate(make_payload(i)) for i in range(count)]


def test_empty_digest_is_sentinel():
    assert format_notifications([]) == "No new notifications in the specified time period."
    assert format_notifications([]) == NO_NOTIFICATIONS


def test_one_line_per_notification_in_order(make_payload):
    """Test three notifications render as three bullet lines, input order kept."""
    digest = format_notifications(_notifications(make_payload, 3))
    lines = digest.split("\n")
    assert len(lines) == 3
    assert all(line.startswith("- **") for line in lines)
    assert [line.split("**")[1] for line in lines] == [
        "Fix flaky test 0",
        "Fix flaky test 1",
        "Fix flaky test 2",
    ]


def test_bullet_contents(make_payload):
    n = Notification.model_validate(make_payload(4, reason="assign"))
    assert format_notifications([n]) == (
        "- **Fix flaky test 4** (PullRequest) in octo/app"
        " | Reason: assign | Updated: 2026-10-17T04:30:00+00:00"
    )


def test_multiline_title_stays_on_one_line(make_payload):
    n = Notification.model_validate(make_payload(1, title="Release\nnotes  v2"))
    digest = format_notifications([n])
    assert "\n" not in digest
    assert "**Release notes v2**" in digest


def test_deterministic(make_payload):
    """Test the same input always renders to identical text."""
    notifications = _notifications(make_payload, 5)
    assert format_notifications(notifications) == format_notifications(list(notifications))


def test_unknown_reason_rendered_as_sent(make_payload):
    n = Notification.model_validate(make_payload(2, reason="something_new"))
    assert "| Reason: something_new |" in format_notifications([n])


def test_reason_from_enum(make_payload):
    payload = make_payload(2)
    n = Notification(
        id="1",
        subject={"title": "t", "type": "Issue"},
        source_repository="octo/app",
        reason=NotificationReason.ASSIGN,
        updated_at=payload["updated_at"],
    )
    assert "| Reason: assign |" in format_notifications([n])
