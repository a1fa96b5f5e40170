"""
Contrat commun des adaptateurs de paiement.

Les réponses brutes des fournisseurs restent à la frontière de l'adaptateur:
elles sont normalisées en ProviderResult et conservées telles quelles dans
'raw' ({provider, raw}) pour l'audit (colonne payments.provider_response).
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Protocol

STATUS_SUCCESS = "success"
STATUS_FAILURE = "failure"
STATUS_PENDING = "pending"

PROVIDER_IYZICO = "iyzico"
PROVIDER_TURINVOICE = "turinvoice"
PROVIDERS = (PROVIDER_IYZICO, PROVIDER_TURINVOICE)


class ProviderNetworkError(Exception):
    """
    Erreur réseau/timeout (aucune réponse métier du fournisseur).
    retryable=True uniquement pour un échec de connexion avant réponse.
    """

    def __init__(self, message: str, retryable: bool = False):
        super().__init__(message)
        self.retryable = retryable


class ProviderConfigurationError(Exception):
    pass


@dataclass
class Customer:
    name: str
    email: str
    phone: str
    ip: str = "127.0.0.1"
    locale: str = "en"

    @property
    def first_name(self) -> str:
        return (self.name or "").split(" ")[0] or "Customer"

    @property
    def last_name(self) -> str:
        parts = (self.name or "").split(" ")
        return " ".join(parts[1:])


@dataclass
class Card:
    holder_name: str
    number: str
    expire_month: str
    expire_year: str
    cvc: str


@dataclass
class ProviderResult:
    provider: str
    status: str
    amount: Decimal
    currency: str
    provider_payment_id: Optional[str] = None
    provider_order_id: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    payment_url: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.status == STATUS_SUCCESS

    def tagged_response(self) -> Dict[str, Any]:
        return {"provider": self.provider, "raw": self.raw}


@dataclass
class ProviderStatus:
    provider: str
    order_id: str
    state: str
    paid: bool
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RefundResult:
    provider: str
    order_id: str
    success: bool
    refund_id: Optional[str] = None
    message: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


class PaymentProvider(Protocol):
    name: str
    currency: str

    def initialize(
        self,
        amount: Decimal,
        currency: str,
        customer: Customer,
        card: Optional[Card] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> ProviderResult: ...

    def get_status(self, order_id: str) -> ProviderStatus: ...

    def refund(self, order_id: str, amount: Optional[Decimal] = None) -> RefundResult: ...
