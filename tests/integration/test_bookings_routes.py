import pytest
from fastapi.testclient import TestClient

from portrait_backend.utils.errors import DatabaseConnectionError


def test_create_pending_booking(client: TestClient, fake_repo, booking_payload):
    response = client.post("/api/booking", json=booking_payload)
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["booking"]["id"] == "b1"
    assert body["booking"]["status"] == "pending"
    assert body["booking"]["packageId"] == "essential"
    assert response.headers["Cache-Control"] == "no-store"


def test_invalid_payload_is_400(client: TestClient, fake_repo, booking_payload):
    response = client.post("/api/booking", json={**booking_payload, "customerEmail": "not-an-email"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request data"
    fake_repo.insert_booking.assert_not_called()


def test_unknown_package_is_400(client: TestClient, fake_repo, booking_payload):
    response = client.post("/api/booking", json={**booking_payload, "packageId": "platinum"})
    assert response.status_code == 400


def test_rooftop_requires_people_count(client: TestClient, fake_repo, booking_payload):
    response = client.post("/api/booking", json={**booking_payload, "packageId": "rooftop"})
    assert response.status_code == 400


def test_amount_mismatch_is_400(client: TestClient, fake_repo, booking_payload):
    response = client.post("/api/booking", json={**booking_payload, "totalAmount": 120})
    assert response.status_code == 400
    assert response.json()["error"] == "Amount does not match package price"
    fake_repo.insert_booking.assert_not_called()


def test_duplicate_is_409(client: TestClient, fake_repo, booking_payload):
    fake_repo.find_recent_duplicate.return_value = True
    response = client.post("/api/booking", json=booking_payload)
    assert response.status_code == 409


def test_database_failure_is_503(client: TestClient, fake_repo, booking_payload):
    fake_repo.insert_booking.side_effect = DatabaseConnectionError()
    response = client.post("/api/booking", json=booking_payload)
    assert response.status_code == 503
    assert response.json()["error"] == "Database connection failed. Please try again later."


def test_create_draft(client: TestClient, fake_repo, booking_payload):
    response = client.post("/api/booking/create-draft", json={**booking_payload, "locale": "es"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "bookingId": "b1"}


def test_create_confirmed_requires_payment_info(client: TestClient, fake_repo, booking_payload):
    response = client.post("/api/booking/create-confirmed", json=booking_payload)
    assert response.status_code == 400
    assert response.json()["error"] == "Payment information required"


def test_create_confirmed(client: TestClient, fake_repo, demo_iyzico, booking_payload):
    payload = {**booking_payload, "paymentId": "demo_1", "conversationId": "conv_1", "bookingId": "draft-1"}
    response = client.post("/api/booking/create-confirmed", json=payload)
    assert response.status_code == 200
    booking = response.json()["booking"]
    assert booking["id"] == "draft-1"
    assert booking["status"] == "confirmed"
    assert booking["paymentId"] == "demo_1"
    fake_repo.insert_payment.assert_called_once()


def test_create_confirmed_unpaid_payment_is_rejected(client: TestClient, fake_repo, demo_iyzico, booking_payload):
    payload = {**booking_payload, "paymentId": "pay_x", "conversationId": "conv_1"}
    response = client.post("/api/booking/create-confirmed", json=payload)
    assert response.status_code == 400
    assert response.json()["error"] == "Payment has not been completed"
    fake_repo.create_or_update_booking.assert_not_called()
    fake_repo.insert_payment.assert_not_called()


def test_unexpected_error_is_sanitized(app, fake_repo, booking_payload, monkeypatch):
    monkeypatch.setattr("portrait_backend.config.IS_DEVELOPMENT", False)
    fake_repo.find_recent_duplicate.side_effect = KeyError("internal detail")
    with TestClient(app, raise_server_exceptions=False) as c:
        response = c.post("/api/booking", json=booking_payload)
    assert response.status_code == 500
    assert response.json() == {"error": "An error occurred while processing your request"}
