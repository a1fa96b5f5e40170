"""
Module 'payments' (feature-first): point d'entrée public.
Réunit le contrat commun, les adaptateurs Iyzico/Turinvoice et la table d'erreurs.
"""
from typing import Dict

from .base import (
    PROVIDER_IYZICO,
    PROVIDER_TURINVOICE,
    PROVIDERS,
    Card,
    Customer,
    PaymentProvider,
    ProviderConfigurationError,
    ProviderNetworkError,
    ProviderResult,
    ProviderStatus,
    RefundResult,
)
from .iyzico_client import IyzicoClient, new_conversation_id
from .iyzico_errors import get_error_message, map_locale_to_iyzico
from .turinvoice_client import TurinvoiceClient, TurinvoiceError

_providers: Dict[str, PaymentProvider] = {}


def get_provider(name: str) -> PaymentProvider:
    """Instance partagée de l'adaptateur demandé (ValueError si inconnu)."""
    if name not in PROVIDERS:
        raise ValueError(f"Unknown payment provider: {name}")
    if name not in _providers:
        _providers[name] = IyzicoClient() if name == PROVIDER_IYZICO else TurinvoiceClient()
    return _providers[name]


__all__ = [
    # base
    "PROVIDER_IYZICO",
    "PROVIDER_TURINVOICE",
    "PROVIDERS",
    "Card",
    "Customer",
    "PaymentProvider",
    "ProviderConfigurationError",
    "ProviderNetworkError",
    "ProviderResult",
    "ProviderStatus",
    "RefundResult",
    # adaptateurs
    "IyzicoClient",
    "TurinvoiceClient",
    "TurinvoiceError",
    "get_provider",
    "new_conversation_id",
    # erreurs fournisseur
    "get_error_message",
    "map_locale_to_iyzico",
]
