"""
Adaptateur Iyzico (paiement carte, EUR, requête/réponse synchrone).

- Authentification IYZWSv2: HMAC-SHA256(randomKey + uriPath + corps JSON) avec la clé secrète
- initialize -> POST /payment/auth, get_status -> POST /payment/detail, refund -> POST /payment/refund
- Sans clés configurées: mode démo (carte de test 5528790000000008 acceptée, les autres refusées)
"""
import base64
import hashlib
import hmac
import json
import logging
import secrets
import time
from decimal import Decimal
from typing import Any, Dict, Optional

from portrait_backend import config
from portrait_backend.pricing.tax import round2
from . import http
from .base import (
    PROVIDER_IYZICO,
    STATUS_FAILURE,
    STATUS_SUCCESS,
    Card,
    Customer,
    ProviderResult,
    ProviderStatus,
    RefundResult,
)
from .iyzico_errors import map_locale_to_iyzico

logger = logging.getLogger(__name__)

DEMO_TEST_CARD = "5528790000000008"
DEMO_ERROR_CODE = "DEMO_INVALID_CARD"
DEMO_ERROR_MESSAGE = "Demo mode: Use test card 5528790000000008 for successful payment"

_PLACEHOLDER_KEYS = {"", "demo-api-key", "demo-secret-key"}


def _dumps(payload: Dict[str, Any]) -> str:
    # Corps signé et corps envoyé doivent être identiques octet pour octet
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def generate_authorization(api_key: str, secret_key: str, random_key: str, uri_path: str, body: str) -> str:
    signature = hmac.new(
        secret_key.encode("utf-8"),
        (random_key + uri_path + body).encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
    auth_string = f"apiKey:{api_key}&randomKey:{random_key}&signature:{signature}"
    return base64.b64encode(auth_string.encode("utf-8")).decode("ascii")


def _random_key() -> str:
    return f"{int(time.time() * 1000)}{secrets.randbelow(10 ** 6):06d}"


def new_conversation_id() -> str:
    """Identifiant de conversation partagé par toutes les tentatives d'un même paiement."""
    return f"payment_{int(time.time() * 1000)}_{secrets.token_hex(6)}"


def _format_price(amount: Decimal) -> str:
    return f"{round2(amount):.2f}"


class IyzicoClient:
    name = PROVIDER_IYZICO
    currency = "EUR"

    def __init__(
        self,
        api_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        base_url: Optional[str] = None,
        identity_number: Optional[str] = None,
    ):
        self.api_key = config.IYZICO_API_KEY if api_key is None else api_key
        self.secret_key = config.IYZICO_SECRET_KEY if secret_key is None else secret_key
        self.base_url = (base_url or config.IYZICO_BASE_URL).rstrip("/")
        self.identity_number = identity_number or config.IYZICO_IDENTITY_NUMBER

    @property
    def demo_mode(self) -> bool:
        return self.api_key in _PLACEHOLDER_KEYS or self.secret_key in _PLACEHOLDER_KEYS

    def _post(self, uri_path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        body = _dumps(payload)
        random_key = _random_key()
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": "IYZWSv2 " + generate_authorization(self.api_key, self.secret_key, random_key, uri_path, body),
            "x-iyzi-rnd": random_key,
        }
        res = http.send("POST", f"{self.base_url}{uri_path}", data=body.encode("utf-8"), headers=headers)
        try:
            return res.json()
        except ValueError:
            logger.warning("iyzico %s returned non-JSON status=%s", uri_path, res.status_code)
            return {"status": STATUS_FAILURE, "errorCode": str(res.status_code), "errorMessage": res.text[:500]}

    def build_payment_request(
        self,
        amount: Decimal,
        currency: str,
        customer: Customer,
        card: Card,
        context: Dict[str, Any],
    ) -> Dict[str, Any]:
        conversation_id = context["conversation_id"]
        price = _format_price(amount)
        address = {
            "contactName": customer.name,
            "city": "Istanbul",
            "country": "Turkey",
            "address": "Istanbul, Turkey",
        }
        return {
            "locale": map_locale_to_iyzico(customer.locale or "en"),
            "conversationId": conversation_id,
            "price": price,
            "paidPrice": price,
            "currency": currency,
            "basketId": f"basket_{conversation_id}",
            "paymentCard": {
                "cardHolderName": card.holder_name,
                "cardNumber": card.number,
                "expireMonth": card.expire_month,
                "expireYear": card.expire_year,
                "cvc": card.cvc,
            },
            "buyer": {
                "id": f"buyer_{conversation_id}",
                "name": customer.first_name,
                "surname": customer.last_name or "User",
                "gsmNumber": customer.phone,
                "email": customer.email,
                "identityNumber": self.identity_number,
                "registrationAddress": "Istanbul, Turkey",
                "ip": customer.ip,
                "city": "Istanbul",
                "country": "Turkey",
            },
            "shippingAddress": dict(address),
            "billingAddress": dict(address),
            "basketItems": [
                {
                    "id": context.get("package_id") or "package",
                    "name": f"Photography Package - {context.get('display_name') or context.get('package_id')}",
                    "category1": "Photography",
                    "itemType": "PHYSICAL",
                    "price": price,
                },
            ],
        }

    def _demo_response(self, request: Dict[str, Any]) -> Dict[str, Any]:
        if request["paymentCard"]["cardNumber"] == DEMO_TEST_CARD:
            return {
                "status": STATUS_SUCCESS,
                "paymentId": f"demo_{int(time.time() * 1000)}",
                "conversationId": request["conversationId"],
                "price": request["price"],
                "currency": request["currency"],
                "errorCode": None,
                "errorMessage": None,
            }
        return {
            "status": STATUS_FAILURE,
            "paymentId": None,
            "conversationId": request["conversationId"],
            "errorCode": DEMO_ERROR_CODE,
            "errorMessage": DEMO_ERROR_MESSAGE,
        }

    def initialize(
        self,
        amount: Decimal,
        currency: str,
        customer: Customer,
        card: Optional[Card] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> ProviderResult:
        if card is None:
            raise ValueError("Card details are required for card payments")
        context = dict(context or {})
        context.setdefault("conversation_id", new_conversation_id())
        request = self.build_payment_request(amount, currency, customer, card, context)

        if self.demo_mode:
            logger.warning("iyzico: API keys not configured, using demo mode")
            raw = self._demo_response(request)
        else:
            raw = self._post("/payment/auth", request)

        succeeded = raw.get("status") == STATUS_SUCCESS
        error_code = raw.get("errorCode")
        return ProviderResult(
            provider=self.name,
            status=STATUS_SUCCESS if succeeded else STATUS_FAILURE,
            amount=round2(amount),
            currency=currency,
            provider_payment_id=str(raw["paymentId"]) if raw.get("paymentId") else None,
            provider_order_id=str(raw.get("conversationId") or context["conversation_id"]),
            error_code=None if succeeded or error_code is None else str(error_code),
            error_message=None if succeeded else (raw.get("errorMessage") or "Payment failed"),
            raw=raw,
        )

    def get_status(self, order_id: str) -> ProviderStatus:
        if self.demo_mode:
            paid = str(order_id).startswith("demo_")
            return ProviderStatus(self.name, str(order_id), "SUCCESS" if paid else "FAILURE", paid, {"demo": True})
        raw = self._post("/payment/detail", {"locale": "en", "paymentId": str(order_id)})
        state = str(raw.get("paymentStatus") or raw.get("status") or "")
        paid = raw.get("status") == STATUS_SUCCESS and state.upper() == "SUCCESS"
        return ProviderStatus(self.name, str(order_id), state, paid, raw)

    def refund(self, order_id: str, amount: Optional[Decimal] = None) -> RefundResult:
        """
        order_id: identifiant de transaction Iyzico (paymentTransactionId).
        amount est obligatoire côté Iyzico.
        """
        if amount is None:
            raise ValueError("Iyzico refunds require an explicit amount")
        if self.demo_mode:
            return RefundResult(self.name, str(order_id), True, f"demo_refund_{order_id}", "Demo refund", {"demo": True})
        raw = self._post("/payment/refund", {
            "locale": "en",
            "paymentTransactionId": str(order_id),
            "price": _format_price(amount),
            "currency": self.currency,
            "ip": "127.0.0.1",
        })
        ok = raw.get("status") == STATUS_SUCCESS
        return RefundResult(
            provider=self.name,
            order_id=str(order_id),
            success=ok,
            refund_id=str(raw.get("paymentTransactionId") or "") or None,
            message=None if ok else raw.get("errorMessage"),
            raw=raw,
        )
