import hashlib
from unittest.mock import MagicMock

import pytest
from fastapi import BackgroundTasks

from portrait_backend.notifications import email, marketing
from portrait_backend.notifications.tasks import PostCommitTasks


def test_hash_customer_data_normalizes():
    expected = hashlib.sha256(b"jane@example.com").hexdigest()
    assert marketing.hash_customer_data("  Jane@Example.COM ") == expected


def test_hash_phone_number_adds_country_code():
    assert marketing.hash_phone_number("555 111 22 33") == marketing.hash_customer_data("905551112233")
    assert marketing.hash_phone_number("+90 555 111 22 33") == marketing.hash_customer_data("905551112233")


def test_purchase_event_fields():
    event = marketing.build_purchase_event("jane@example.com", "5551112233", "premium", 84.0, "tx1", "evt_1")
    assert event["event_name"] == "Purchase"
    assert event["event_id"] == "evt_1"
    assert event["user_data"]["em"] == [marketing.hash_customer_data("jane@example.com")]
    assert event["custom_data"]["content_ids"] == ["premium"]
    assert event["custom_data"]["value"] == 84.0
    assert event["custom_data"]["currency"] == "EUR"
    assert event["custom_data"]["transaction_id"] == "tx1"

    assert "event_id" not in marketing.build_purchase_event("jane@example.com", "", "premium", 84.0, "tx1")


def test_marketing_calls_skip_when_unconfigured(monkeypatch):
    post = MagicMock()
    monkeypatch.setattr("portrait_backend.notifications.marketing.requests.post", post)
    monkeypatch.setattr("portrait_backend.config.RESEND_AUDIENCE_ID", "")
    monkeypatch.setattr("portrait_backend.config.FACEBOOK_ACCESS_TOKEN", "")
    assert marketing.add_contact_to_audience("jane@example.com", "Jane", "Doe") is False
    assert marketing.track_facebook_purchase("jane@example.com", "1", "essential", 150.0, "tx") is False
    post.assert_not_called()


def test_facebook_event_is_posted(monkeypatch):
    post = MagicMock(return_value=MagicMock(ok=True))
    monkeypatch.setattr("portrait_backend.notifications.marketing.requests.post", post)
    monkeypatch.setattr("portrait_backend.config.FACEBOOK_ACCESS_TOKEN", "token")
    monkeypatch.setattr("portrait_backend.config.FACEBOOK_DATASET_ID", "dataset")

    assert marketing.track_facebook_purchase("jane@example.com", "1", "essential", 150.0, "tx") is True
    url = post.call_args.args[0]
    body = post.call_args.kwargs["json"]
    assert url.endswith("/dataset/events")
    assert body["access_token"] == "token"
    assert body["data"][0]["custom_data"]["transaction_id"] == "tx"


def test_send_email_requires_api_key(monkeypatch):
    monkeypatch.setattr("portrait_backend.config.RESEND_API_KEY", "")
    with pytest.raises(email.EmailNotConfiguredError):
        email.send_email(["jane@example.com"], "Hi", "<p>Hi</p>")


def test_send_email_rejected(monkeypatch):
    monkeypatch.setattr("portrait_backend.config.RESEND_API_KEY", "re_key")
    monkeypatch.setattr(
        "portrait_backend.notifications.email.requests.post",
        MagicMock(return_value=MagicMock(ok=False, status_code=422, text="invalid from")),
    )
    with pytest.raises(email.EmailSendError):
        email.send_email(["jane@example.com"], "Hi", "<p>Hi</p>")


def test_recovery_email_locale_and_link(monkeypatch):
    sent = MagicMock(return_value={"id": "email_1"})
    monkeypatch.setattr(email, "send_email", sent)
    monkeypatch.setattr("portrait_backend.config.BASE_URL", "https://site.example")

    email.send_recovery_email({"user_email": "jane@example.com", "user_name": "Jane", "locale": "es"})
    to, subject, html = sent.call_args.args
    assert to == ["jane@example.com"]
    assert subject == email.RECOVERY_SUBJECTS["es"]
    assert "https://site.example/es/packages" in html
    assert "Jane" in html


def test_recovery_email_unknown_locale_falls_back_to_english(monkeypatch):
    sent = MagicMock(return_value={"id": "email_1"})
    monkeypatch.setattr(email, "send_email", sent)
    email.send_recovery_email({"user_email": "jane@example.com", "user_name": "Jane", "locale": "de"})
    assert sent.call_args.args[1] == email.RECOVERY_SUBJECTS["en"]
    assert email.recovery_locale(None) == "en"
    assert email.recovery_locale("ar") == "ar"


def test_recovery_templates_escape_names():
    html = email.render("recovery_en.html", name="<script>x</script>", url="https://site.example/en/packages")
    assert "<script>x</script>" not in html


def test_booking_confirmation_content(monkeypatch):
    sent = MagicMock(return_value={"id": "email_2"})
    monkeypatch.setattr(email, "send_email", sent)
    email.send_booking_confirmation(
        "b1", "Jane Doe", "jane@example.com", "premium", "2026-06-15", "10:00", 280.0,
    )
    to, subject, html = sent.call_args.args
    assert subject == "Booking Confirmation - Premium Package"
    assert "Jane Doe" in html
    assert "2026-06-15" in html


def test_post_commit_tasks_are_isolated():
    calls = []
    tasks = PostCommitTasks()
    tasks.add("first", lambda: (_ for _ in ()).throw(RuntimeError("boom")))
    tasks.add("second", calls.append, "ran")

    tasks.dispatch()

    assert calls == ["ran"]
    assert len(tasks) == 0


def test_post_commit_tasks_go_to_background():
    background = BackgroundTasks()
    tasks = PostCommitTasks()
    tasks.add("one", print)
    tasks.add("two", print)
    tasks.dispatch(background)
    assert len(background.tasks) == 2
    assert len(tasks) == 0
