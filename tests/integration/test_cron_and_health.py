from unittest.mock import MagicMock

from fastapi.testclient import TestClient


def test_abandoned_recovery_no_drafts(client: TestClient, fake_repo, monkeypatch):
    monkeypatch.setattr("portrait_backend.config.CRON_SECRET", "")
    response = client.get("/api/cron/abandoned-recovery")
    assert response.status_code == 200
    assert response.json() == {"message": "No abandoned drafts found"}


def test_abandoned_recovery_requires_secret(client: TestClient, fake_repo, monkeypatch):
    monkeypatch.setattr("portrait_backend.config.CRON_SECRET", "cron-secret")

    assert client.get("/api/cron/abandoned-recovery").status_code == 401
    assert client.get(
        "/api/cron/abandoned-recovery", headers={"Authorization": "Bearer wrong"}
    ).status_code == 401

    response = client.get("/api/cron/abandoned-recovery", headers={"Authorization": "Bearer cron-secret"})
    assert response.status_code == 200


def test_abandoned_recovery_reports_each_draft(client: TestClient, fake_repo, monkeypatch):
    monkeypatch.setattr("portrait_backend.config.CRON_SECRET", "")
    fake_repo.fetch_abandoned_drafts.return_value = [
        {"id": "d1", "user_email": "a@example.com", "user_name": "A", "created_at": "2026-10-19T00:00:00+00:00", "locale": "ru"},
    ]
    fake_repo.has_later_conversion.return_value = False
    fake_repo.mark_abandoned_email_sent.return_value = True
    monkeypatch.setattr(
        "portrait_backend.notifications.email.send_recovery_email",
        MagicMock(return_value={"id": "email_1"}),
    )

    response = client.get("/api/cron/abandoned-recovery")

    assert response.json() == {
        "success": True,
        "processed": [{"id": "d1", "status": "sent", "emailId": "email_1"}],
    }


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_unknown_host_is_rejected(app):
    with TestClient(app, base_url="http://evil.example") as c:
        assert c.get("/health").status_code == 400


def test_health_supabase(client: TestClient, monkeypatch):
    monkeypatch.setattr("portrait_backend.config.SUPABASE_URL", "")
    response = client.get("/health/supabase")
    assert response.status_code == 200
    body = response.json()
    assert body["connect_ok"] is True
    assert set(body["tables"]) == {"bookings", "payments", "customers", "rate_limits"}
    assert body["rate_limit"]["enabled"] is False


def test_rate_limited_route_returns_429(app, client: TestClient, fake_repo, booking_payload, monkeypatch):
    monkeypatch.setattr(
        "portrait_backend.utils.rate_limit.check_rate_limit",
        lambda *a, **kw: {"success": False, "remaining": 0, "reset_time": 0},
    )
    app.state.rate_limit_enabled = True
    try:
        response = client.post("/api/booking", json=booking_payload)
    finally:
        app.state.rate_limit_enabled = False
    assert response.status_code == 429
    assert response.headers["Retry-After"] == "1"
    fake_repo.insert_booking.assert_not_called()
