import base64
import hashlib
import hmac
import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from portrait_backend.payments.base import Card, Customer
from portrait_backend.payments.iyzico_client import (
    DEMO_ERROR_CODE,
    DEMO_TEST_CARD,
    IyzicoClient,
    generate_authorization,
)


@pytest.fixture
def customer():
    return Customer(name="Jane Van Doe", email="jane@example.com", phone="+905551112233", ip="10.0.0.1", locale="tr")


def _card(number=DEMO_TEST_CARD):
    return Card(holder_name="Jane Doe", number=number, expire_month="12", expire_year="2030", cvc="123")


def test_authorization_header_is_iyzws_v2_hmac():
    header = generate_authorization("api", "secret", "123", "/payment/auth", '{"a":1}')
    decoded = base64.b64decode(header).decode()
    expected_sig = hmac.new(b"secret", b'123/payment/auth{"a":1}', hashlib.sha256).hexdigest()
    assert decoded == f"apiKey:api&randomKey:123&signature:{expected_sig}"


def test_demo_mode_when_keys_missing():
    assert IyzicoClient(api_key="", secret_key="").demo_mode is True
    assert IyzicoClient(api_key="k", secret_key="s").demo_mode is False


def test_demo_test_card_succeeds(customer):
    client = IyzicoClient(api_key="", secret_key="")
    res = client.initialize(Decimal("150"), "EUR", customer, card=_card(), context={"package_id": "essential"})
    assert res.succeeded
    assert res.provider_payment_id.startswith("demo_")
    assert res.provider_order_id.startswith("payment_")
    assert res.amount == Decimal("150.00")
    assert res.tagged_response()["provider"] == "iyzico"


def test_demo_other_card_fails(customer):
    client = IyzicoClient(api_key="", secret_key="")
    res = client.initialize(Decimal("150"), "EUR", customer, card=_card("4111111111111111"))
    assert res.status == "failure"
    assert res.error_code == DEMO_ERROR_CODE
    assert res.provider_payment_id is None


def test_card_is_required(customer):
    with pytest.raises(ValueError):
        IyzicoClient(api_key="", secret_key="").initialize(Decimal("150"), "EUR", customer)


def test_build_payment_request_shape(customer):
    client = IyzicoClient(api_key="k", secret_key="s", identity_number="11111111111")
    req = client.build_payment_request(
        Decimal("100.5"), "EUR", customer, _card(),
        {"conversation_id": "conv1", "package_id": "premium", "display_name": "Premium Package"},
    )
    assert req["price"] == "100.50"
    assert req["paidPrice"] == "100.50"
    assert req["locale"] == "tr"
    assert req["basketId"] == "basket_conv1"
    assert req["buyer"]["name"] == "Jane"
    assert req["buyer"]["surname"] == "Van Doe"
    assert req["buyer"]["ip"] == "10.0.0.1"
    assert req["basketItems"][0]["name"] == "Photography Package - Premium Package"


def test_live_call_signs_and_maps_failure(monkeypatch, customer):
    response = MagicMock()
    response.json.return_value = {"status": "failure", "errorCode": 10051, "errorMessage": "Insufficient funds"}
    send = MagicMock(return_value=response)
    monkeypatch.setattr("portrait_backend.payments.iyzico_client.http.send", send)

    client = IyzicoClient(api_key="k", secret_key="s", base_url="https://sandbox.example")
    res = client.initialize(Decimal("150"), "EUR", customer, card=_card(), context={"conversation_id": "c1"})

    assert res.status == "failure"
    assert res.error_code == "10051"
    assert res.error_message == "Insufficient funds"
    method, url = send.call_args.args
    kwargs = send.call_args.kwargs
    assert (method, url) == ("POST", "https://sandbox.example/payment/auth")
    assert kwargs["headers"]["Authorization"].startswith("IYZWSv2 ")
    body = json.loads(kwargs["data"].decode())
    assert body["conversationId"] == "c1"


def test_non_json_response_is_a_failure(monkeypatch, customer):
    response = MagicMock(status_code=502, text="Bad gateway")
    response.json.side_effect = ValueError("no json")
    monkeypatch.setattr("portrait_backend.payments.iyzico_client.http.send", MagicMock(return_value=response))

    res = IyzicoClient(api_key="k", secret_key="s").initialize(Decimal("150"), "EUR", customer, card=_card())
    assert res.status == "failure"
    assert res.error_code == "502"


def test_status_and_refund_in_demo_mode():
    client = IyzicoClient(api_key="", secret_key="")
    assert client.get_status("demo_123").paid is True
    assert client.get_status("987").paid is False
    assert client.refund("tx1", Decimal("10")).success is True
    with pytest.raises(ValueError):
        client.refund("tx1")


def test_live_status(monkeypatch):
    response = MagicMock()
    response.json.return_value = {"status": "success", "paymentStatus": "SUCCESS"}
    monkeypatch.setattr("portrait_backend.payments.iyzico_client.http.send", MagicMock(return_value=response))
    status = IyzicoClient(api_key="k", secret_key="s").get_status("123")
    assert status.paid is True
    assert status.state == "SUCCESS"
