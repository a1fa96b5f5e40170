from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from portrait_backend.recovery import service
from portrait_backend.utils.errors import DatabaseConnectionError


def _draft(i, locale="en"):
    return {
        "id": f"d{i}",
        "user_email": f"user{i}@example.com",
        "user_name": f"User {i}",
        "created_at": "2026-10-19T02:00:00+00:00",
        "locale": locale,
    }


@pytest.fixture
def repo(monkeypatch):
    fake = MagicMock()
    fake.has_later_conversion.return_value = False
    fake.mark_abandoned_email_sent.return_value = True
    for name in ("fetch_abandoned_drafts", "has_later_conversion", "mark_abandoned_email_sent"):
        monkeypatch.setattr(service.repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def sent(monkeypatch):
    mailer = MagicMock(return_value={"id": "email_1"})
    monkeypatch.setattr(service.email_notifications, "send_recovery_email", mailer)
    return mailer


def test_no_drafts(repo, sent):
    repo.fetch_abandoned_drafts.return_value = []
    assert service.run_abandoned_recovery() == {"message": service.NO_DRAFTS_MESSAGE}
    sent.assert_not_called()


def test_window_uses_given_now(repo, sent):
    repo.fetch_abandoned_drafts.return_value = []
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    service.run_abandoned_recovery(now)
    repo.fetch_abandoned_drafts.assert_called_once_with(now)


def test_sent_converted_and_failed_are_reported_per_draft(repo, sent):
    repo.fetch_abandoned_drafts.return_value = [_draft(1), _draft(2), _draft(3, "zh")]
    repo.has_later_conversion.side_effect = lambda email, created_at: email == "user2@example.com"
    sent.side_effect = [{"id": "email_1"}, RuntimeError("resend down")]

    res = service.run_abandoned_recovery()

    assert res["success"] is True
    assert res["processed"] == [
        {"id": "d1", "status": "sent", "emailId": "email_1"},
        {"id": "d2", "status": "already_converted"},
        {"id": "d3", "status": "failed", "error": "resend down"},
    ]
    marked = [c.args[0] for c in repo.mark_abandoned_email_sent.call_args_list]
    assert marked == ["d1", "d2"]


def test_conversion_lookup_failure_marks_draft_failed(repo, sent):
    repo.fetch_abandoned_drafts.return_value = [_draft(1), _draft(2)]
    repo.has_later_conversion.side_effect = [DatabaseConnectionError(), False]

    res = service.run_abandoned_recovery()

    assert res["processed"][0]["status"] == "failed"
    assert res["processed"][1]["status"] == "sent"
    assert sent.call_count == 1


def test_flag_update_failure_still_reports_sent(repo, sent):
    repo.mark_abandoned_email_sent.return_value = False
    assert service.process_draft(_draft(1))["status"] == "sent"
