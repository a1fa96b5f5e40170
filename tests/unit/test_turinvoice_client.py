from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from portrait_backend.payments.base import Customer, ProviderConfigurationError, ProviderNetworkError
from portrait_backend.payments.turinvoice_client import (
    SessionExpiredError,
    TurinvoiceClient,
    rewrite_payment_url,
)
from portrait_backend.pricing.currency import CurrencyConverter
from portrait_backend.utils.cache import TTLCache


def _response(status_code=200, payload=None, cookies=None):
    res = MagicMock()
    res.status_code = status_code
    res.ok = 200 <= status_code < 400
    res.json.return_value = payload or {}
    res.cookies = cookies or {}
    res.text = ""
    return res


@pytest.fixture
def client():
    converter = CurrencyConverter(fetch_rate=lambda: "40", cache=TTLCache(3600))
    return TurinvoiceClient(
        base_url="https://turinvoice.example",
        login="user",
        password="pass",
        id_tsp="42",
        secret_key="webhook-secret",
        callback_url="https://api.example/api/payment/webhook/turinvoice",
        converter=converter,
    )


def test_rewrite_payment_url():
    assert rewrite_payment_url("https://pay.turinvoice.com/o/1") == "https://pay.turinvoice.ru/o/1"
    assert rewrite_payment_url(None) is None
    assert rewrite_payment_url("") == ""


def test_require_configured_lists_missing_settings():
    c = TurinvoiceClient(login="", password="", id_tsp="", secret_key="", callback_url="")
    with pytest.raises(ProviderConfigurationError) as info:
        c.with_session(lambda session_id: session_id)
    assert "TURINVOICE_LOGIN" in str(info.value)
    assert "TURINVOICE_CALLBACK_URL" in str(info.value)


def test_with_session_retries_once_on_expired_session(client, monkeypatch):
    logins = iter(["s1", "s2"])
    monkeypatch.setattr(client, "login", lambda: next(logins))
    seen = []

    def _op(session_id):
        seen.append(session_id)
        if session_id == "s1":
            raise SessionExpiredError("expired")
        return "done"

    assert client.with_session(_op) == "done"
    assert seen == ["s1", "s2"]


def test_with_session_second_expiry_propagates(client, monkeypatch):
    monkeypatch.setattr(client, "login", lambda: "s")

    def _op(session_id):
        raise SessionExpiredError("expired")

    with pytest.raises(SessionExpiredError):
        client.with_session(_op)


def test_login_requires_ok_code_and_cookie(client, monkeypatch):
    monkeypatch.setattr(
        "portrait_backend.payments.turinvoice_client.http.send",
        MagicMock(return_value=_response(payload={"code": "OK"}, cookies={"sessionid": "abc"})),
    )
    assert client.login() == "abc"

    monkeypatch.setattr(
        "portrait_backend.payments.turinvoice_client.http.send",
        MagicMock(return_value=_response(payload={"code": "OK"})),
    )
    with pytest.raises(ProviderNetworkError):
        client.login()


def test_create_order_converts_and_rewrites_url(client, monkeypatch):
    calls = []

    def _send(method, url, **kwargs):
        calls.append((method, url, kwargs))
        if url.endswith("/auth/login"):
            return _response(payload={"code": "OK"}, cookies={"sessionid": "sess"})
        if method == "PUT":
            return _response(payload={"idOrder": 777})
        return _response(payload={
            "id": 777,
            "state": "new",
            "amount": 4040.0,
            "paymentUrl": "https://pay.turinvoice.com/777",
        })

    monkeypatch.setattr("portrait_backend.payments.turinvoice_client.http.send", _send)
    customer = Customer(name="Jane Doe", email="jane@example.com", phone="+905551112233")
    res = client.initialize(Decimal("100"), "EUR", customer, context={"package_id": "essential", "redirect_url": "https://site/ok"})

    assert res.status == "pending"
    assert res.provider_order_id == "777"
    assert res.payment_url == "https://pay.turinvoice.ru/777"
    assert res.extra["exchangeRate"] == 40.0
    assert res.extra["amountEUR"] == 100.0

    put_call = [c for c in calls if c[0] == "PUT"][0]
    payload = put_call[2]["json"]
    # (100 + 1) * 40
    assert payload["amount"] == 4040.0
    assert payload["idTSP"] == 42
    assert payload["currency"] == "TRY"
    assert payload["redirectURL"] == "https://site/ok"
    assert put_call[2]["headers"]["Cookie"] == "sessionid=sess"


def test_rejected_order_is_a_failure_result(client, monkeypatch):
    def _send(method, url, **kwargs):
        if url.endswith("/auth/login"):
            return _response(payload={"code": "OK"}, cookies={"sessionid": "sess"})
        return _response(status_code=400)

    monkeypatch.setattr("portrait_backend.payments.turinvoice_client.http.send", _send)
    customer = Customer(name="Jane Doe", email="jane@example.com", phone="1")
    res = client.initialize(Decimal("50"), "EUR", customer)
    assert res.status == "failure"
    assert res.error_code == "TURINVOICE_ORDER_FAILED"


def test_login_outage_and_bad_credentials_are_not_refusals(client, monkeypatch):
    send = MagicMock(return_value=_response(status_code=502))
    monkeypatch.setattr("portrait_backend.payments.turinvoice_client.http.send", send)
    with pytest.raises(ProviderNetworkError) as info:
        client.login()
    assert info.value.retryable is False

    send.return_value = _response(status_code=401)
    with pytest.raises(ProviderConfigurationError):
        client.login()

    send.return_value = _response(payload={"code": "INVALID_CREDENTIALS"}, cookies={"sessionid": "abc"})
    with pytest.raises(ProviderConfigurationError):
        client.login()


def test_server_error_on_order_creation_propagates(client, monkeypatch):
    def _send(method, url, **kwargs):
        if url.endswith("/auth/login"):
            return _response(payload={"code": "OK"}, cookies={"sessionid": "sess"})
        return _response(status_code=503)

    monkeypatch.setattr("portrait_backend.payments.turinvoice_client.http.send", _send)
    customer = Customer(name="Jane Doe", email="jane@example.com", phone="1")
    with pytest.raises(ProviderNetworkError):
        client.initialize(Decimal("50"), "EUR", customer)


def test_get_status_reports_paid(client, monkeypatch):
    monkeypatch.setattr(client, "get_order", lambda order_id: {"id": order_id, "state": "paid"})
    status = client.get_status("777")
    assert status.paid is True
    assert status.state == "paid"

    monkeypatch.setattr(client, "get_order", lambda order_id: {"id": order_id, "state": "paying"})
    assert client.get_status("777").paid is False


def test_verify_webhook(client):
    assert client.verify_webhook("webhook-secret") is True
    assert client.verify_webhook("wrong") is False
    assert client.verify_webhook(None) is False
    assert TurinvoiceClient(secret_key="").verify_webhook("") is False
