"""
Conversion EUR -> TRY (le fournisseur Turinvoice n'accepte que la livre turque).

- Taux mis en cache 1h via un TTLCache injecté
- Échec de l'API: dernier taux connu (même expiré), sinon taux de repli fixe
- Tampon de 1 EUR ajouté avant conversion pour absorber la variation du taux
"""
import logging
from decimal import Decimal
from typing import Callable, Optional

import requests

from portrait_backend import config
from portrait_backend.utils.cache import TTLCache
from .tax import Number, round2, to_decimal

logger = logging.getLogger(__name__)

CACHE_KEY = "EUR_TRY"
CONVERSION_BUFFER_EUR = Decimal("1")


def fetch_eur_to_try_rate() -> Decimal:
    """Interroge l'API publique de taux (sans clé). Lève en cas de réponse invalide."""
    res = requests.get(
        config.EXCHANGE_RATE_API_URL,
        headers={"Accept": "application/json"},
        timeout=config.EXCHANGE_RATE_TIMEOUT_SECONDS,
    )
    res.raise_for_status()
    data = res.json()
    rate = (data.get("rates") or {}).get("TRY")
    if data.get("result") != "success" or not rate:
        raise ValueError("Invalid response from exchange rate API")
    return to_decimal(rate)


class CurrencyConverter:
    def __init__(
        self,
        fetch_rate: Callable[[], Number] = fetch_eur_to_try_rate,
        cache: Optional[TTLCache] = None,
        fallback_rate: Number = config.EXCHANGE_RATE_FALLBACK,
    ):
        self._fetch_rate = fetch_rate
        self.cache = cache if cache is not None else TTLCache(config.EXCHANGE_RATE_CACHE_SECONDS)
        self.fallback_rate = to_decimal(fallback_rate)

    def get_eur_to_try_rate(self) -> Decimal:
        cached = self.cache.get(CACHE_KEY)
        if cached is not None:
            return cached
        try:
            rate = to_decimal(self._fetch_rate())
            self.cache.set(CACHE_KEY, rate)
            return rate
        except Exception:
            stale = self.cache.get_stale(CACHE_KEY)
            if stale is not None:
                logger.warning("currency: rate fetch failed, using stale cached rate %s", stale, exc_info=True)
                return stale
            logger.warning("currency: rate fetch failed, using fallback rate %s", self.fallback_rate, exc_info=True)
            return self.fallback_rate

    def convert_eur_to_try(self, amount_eur: Number) -> Decimal:
        rate = self.get_eur_to_try_rate()
        return round2((to_decimal(amount_eur) + CONVERSION_BUFFER_EUR) * rate)


# Instance partagée par l'application (seul état mutable en mémoire, non verrouillé)
default_converter = CurrencyConverter()


def get_eur_to_try_rate() -> Decimal:
    return default_converter.get_eur_to_try_rate()


def convert_eur_to_try(amount_eur: Number) -> Decimal:
    return default_converter.convert_eur_to_try(amount_eur)


def format_currency(amount: Number, currency: str) -> str:
    # Format tr-TR: 1.234,56 suivi du code devise
    integer, _, fraction = f"{round2(amount):,.2f}".partition(".")
    return f"{integer.replace(',', '.')},{fraction} {currency}"
