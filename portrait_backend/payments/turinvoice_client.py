"""
Adaptateur Turinvoice (facture en TRY, paiement via URL/QR côté client).

- Session par cookie 'sessionid' obtenue à chaque opération (pas de réutilisation entre appels)
- with_session(fn): login puis fn(session_id); un 401 (session expirée) relance login+appel une fois
- Les montants EUR sont convertis en TRY (tampon de 1 EUR) avant envoi
- L'URL de paiement renvoyée est réécrite de turinvoice.com vers turinvoice.ru
- 5xx, login impossible: ProviderNetworkError/ProviderConfigurationError (indisponibilité);
  seules les réponses 4xx deviennent un refus (status=failure)
"""
import hmac
import logging
from decimal import Decimal
from typing import Any, Callable, Dict, Optional, TypeVar

from portrait_backend import config
from portrait_backend.pricing import currency as fx
from portrait_backend.pricing.tax import round2
from . import http
from .base import (
    PROVIDER_TURINVOICE,
    STATUS_FAILURE,
    STATUS_PENDING,
    Card,
    Customer,
    ProviderConfigurationError,
    ProviderNetworkError,
    ProviderResult,
    ProviderStatus,
    RefundResult,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

ORDER_STATE_NEW = "new"
ORDER_STATE_PAYING = "paying"
ORDER_STATE_PAID = "paid"


class TurinvoiceError(Exception):
    """Refus explicite du fournisseur (réponse 4xx, commande absente...)."""


class SessionExpiredError(TurinvoiceError):
    pass


def rewrite_payment_url(url: Optional[str]) -> Optional[str]:
    if not url:
        return url
    return url.replace("turinvoice.com", "turinvoice.ru")


class TurinvoiceClient:
    name = PROVIDER_TURINVOICE
    currency = "TRY"

    def __init__(
        self,
        base_url: Optional[str] = None,
        login: Optional[str] = None,
        password: Optional[str] = None,
        id_tsp: Optional[str] = None,
        secret_key: Optional[str] = None,
        callback_url: Optional[str] = None,
        converter: Optional[fx.CurrencyConverter] = None,
    ):
        self.base_url = (base_url or config.TURINVOICE_BASE_URL).rstrip("/")
        self.login_name = config.TURINVOICE_LOGIN if login is None else login
        self.password = config.TURINVOICE_PASSWORD if password is None else password
        self.id_tsp = config.TURINVOICE_ID_TSP if id_tsp is None else id_tsp
        self.secret_key = config.TURINVOICE_SECRET_KEY if secret_key is None else secret_key
        self.callback_url = config.TURINVOICE_CALLBACK_URL if callback_url is None else callback_url
        self.converter = converter or fx.default_converter

    def require_configured(self) -> None:
        missing = [
            name for name, value in (
                ("TURINVOICE_LOGIN", self.login_name),
                ("TURINVOICE_PASSWORD", self.password),
                ("TURINVOICE_ID_TSP", self.id_tsp),
                ("TURINVOICE_SECRET_KEY", self.secret_key),
                ("TURINVOICE_CALLBACK_URL", self.callback_url),
            ) if not value
        ]
        if missing:
            raise ProviderConfigurationError(f"Turinvoice is not configured: missing {', '.join(missing)}")

    # --- session ---

    def login(self) -> str:
        res = http.send(
            "POST",
            f"{self.base_url}/api/v1/auth/login",
            json={"login": self.login_name, "password": self.password},
        )
        if res.status_code in (401, 403):
            raise ProviderConfigurationError(f"Turinvoice rejected the configured credentials: {res.status_code}")
        if res.status_code != 200:
            raise ProviderNetworkError(f"Turinvoice login failed: {res.status_code}", retryable=False)
        data = res.json()
        if data.get("code") != "OK":
            raise ProviderConfigurationError(f"Turinvoice login error: {data.get('code')}")
        session_id = res.cookies.get("sessionid")
        if not session_id:
            raise ProviderNetworkError("No session cookie received from Turinvoice", retryable=False)
        return session_id

    def with_session(self, fn: Callable[[str], T]) -> T:
        self.require_configured()
        try:
            return fn(self.login())
        except SessionExpiredError:
            logger.info("turinvoice: session expired, retrying login once")
            return fn(self.login())

    def _call(self, method: str, path: str, session_id: str, **kwargs):
        headers = kwargs.pop("headers", {})
        headers["Cookie"] = f"sessionid={session_id}"
        res = http.send(method, f"{self.base_url}{path}", headers=headers, **kwargs)
        if res.status_code == 401:
            raise SessionExpiredError("Turinvoice session expired")
        if res.status_code >= 500:
            logger.error("turinvoice %s %s unavailable status=%s", method, path, res.status_code)
            raise ProviderNetworkError(f"Turinvoice {method} {path} unavailable: {res.status_code}", retryable=False)
        if not res.ok:
            logger.error("turinvoice %s %s failed status=%s body=%s", method, path, res.status_code, res.text[:500])
            raise TurinvoiceError(f"Turinvoice {method} {path} failed: {res.status_code}")
        return res

    def _fetch_order(self, session_id: str, order_id: str) -> Dict[str, Any]:
        data = self._call("GET", "/api/v1/tsp/order", session_id, params={"idOrder": order_id}).json()
        data["paymentUrl"] = rewrite_payment_url(data.get("paymentUrl"))
        return data

    # --- opérations ---

    def create_order(self, amount_eur: Decimal, name: str, redirect_url: Optional[str] = None) -> Dict[str, Any]:
        exchange_rate = self.converter.get_eur_to_try_rate()
        amount_try = self.converter.convert_eur_to_try(amount_eur)
        payload: Dict[str, Any] = {
            "idTSP": int(self.id_tsp),
            "amount": float(amount_try),
            "name": name,
            "currency": "TRY",
            "quantity": 1,
            "callbackUrl": self.callback_url,
        }
        if redirect_url:
            payload["redirectURL"] = redirect_url

        def _create(session_id: str) -> Dict[str, Any]:
            data = self._call("PUT", "/api/v1/tsp/order", session_id, json=payload).json()
            order_id = data.get("idOrder")
            if not order_id:
                raise TurinvoiceError("No order ID received from Turinvoice")
            return self._fetch_order(session_id, str(order_id))

        order = self.with_session(_create)
        order["amountEUR"] = float(round2(amount_eur))
        order["exchangeRate"] = float(exchange_rate)
        return order

    def get_order(self, order_id: str) -> Dict[str, Any]:
        return self.with_session(lambda session_id: self._fetch_order(session_id, str(order_id)))

    def get_qr_code(self, order_id: str) -> bytes:
        def _qr(session_id: str) -> bytes:
            return self._call(
                "GET", "/api/v1/tsp/order/payment/qr", session_id, params={"idOrder": order_id}
            ).content

        return self.with_session(_qr)

    def initialize(
        self,
        amount: Decimal,
        currency: str,
        customer: Customer,
        card: Optional[Card] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> ProviderResult:
        """
        Crée la commande TRY pour un montant EUR (acompte).
        Résultat 'pending' avec l'URL de paiement; la confirmation arrive par webhook ou polling.
        """
        context = context or {}
        name = f"Photography {context.get('package_id', 'package')} - {customer.name}"
        try:
            order = self.create_order(amount, name, context.get("redirect_url"))
        except TurinvoiceError as e:
            logger.warning("turinvoice: order creation rejected: %s", e)
            return ProviderResult(
                provider=self.name,
                status=STATUS_FAILURE,
                amount=round2(amount),
                currency="EUR",
                error_code="TURINVOICE_ORDER_FAILED",
                error_message=str(e),
            )
        order_id = str(order.get("id"))
        return ProviderResult(
            provider=self.name,
            status=STATUS_PENDING,
            amount=round2(amount),
            currency="EUR",
            provider_payment_id=order_id,
            provider_order_id=order_id,
            payment_url=order.get("paymentUrl"),
            extra={
                "amountTRY": order.get("amount"),
                "amountEUR": order.get("amountEUR"),
                "exchangeRate": order.get("exchangeRate"),
                "state": order.get("state"),
            },
            raw=order,
        )

    def get_status(self, order_id: str) -> ProviderStatus:
        order = self.get_order(order_id)
        state = str(order.get("state") or "")
        return ProviderStatus(self.name, str(order_id), state, state == ORDER_STATE_PAID, order)

    def refund(self, order_id: str, amount: Optional[Decimal] = None, description: Optional[str] = None) -> RefundResult:
        payload: Dict[str, Any] = {"idOrder": int(order_id)}
        if amount:
            payload["amount"] = float(round2(amount))
        if description:
            payload["description"] = description

        data = self.with_session(
            lambda session_id: self._call("PUT", "/api/v1/tsp/refund", session_id, json=payload).json()
        )
        message = data.get("message")
        return RefundResult(
            provider=self.name,
            order_id=str(order_id),
            success=data.get("code") == "OK",
            refund_id=str(data["idRefund"]) if data.get("idRefund") else None,
            message=message.get("TR") if isinstance(message, dict) else message,
            raw=data,
        )

    def verify_webhook(self, secret_key: Optional[str]) -> bool:
        if not self.secret_key or not secret_key:
            return False
        return hmac.compare_digest(str(secret_key), self.secret_key)
