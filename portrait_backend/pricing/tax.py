"""
Calculs de TVA (KDV turque) sur des montants décimaux.

Toutes les opérations passent par Decimal et arrondissent à 2 décimales
(ROUND_HALF_UP, soit « half away from zero ») à chaque étape intermédiaire.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Union

Number = Union[int, float, str, Decimal]

TAX_RATES = {
    "TURKEY": Decimal("0.20"),
    "DEFAULT": Decimal("0"),
}
DEFAULT_TAX_RATE = TAX_RATES["TURKEY"]

CENT = Decimal("0.01")

_INTL_LOCALES = {"en": "en-US", "ar": "ar-SA", "ru": "ru-RU", "es": "es-ES", "tr": "tr-TR"}
# (séparateur milliers, séparateur décimal, symbole en suffixe)
_NUMBER_STYLES = {
    "en-US": (",", ".", False),
    "ar-SA": (",", ".", True),
    "ru-RU": (" ", ",", True),
    "es-ES": (".", ",", True),
    "tr-TR": (".", ",", False),
}


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() évite l'expansion binaire des floats (0.1 -> 0.1000000000000000055...)
    return Decimal(str(value))


def round2(value: Number) -> Decimal:
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class TaxBreakdown:
    base_price: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total_price: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "basePrice": float(self.base_price),
            "taxRate": float(self.tax_rate),
            "taxAmount": float(self.tax_amount),
            "totalPrice": float(self.total_price),
        }


def calculate_tax(base_price: Number, tax_rate: Number = DEFAULT_TAX_RATE) -> Decimal:
    return round2(round2(base_price) * to_decimal(tax_rate))


def calculate_total_with_tax(base_price: Number, tax_rate: Number = DEFAULT_TAX_RATE) -> Decimal:
    return round2(round2(base_price) * (1 + to_decimal(tax_rate)))


def calculate_base_price(total_price: Number, tax_rate: Number = DEFAULT_TAX_RATE) -> Decimal:
    return round2(round2(total_price) / (1 + to_decimal(tax_rate)))


def get_tax_breakdown(base_price: Number, tax_rate: Number = DEFAULT_TAX_RATE) -> TaxBreakdown:
    """Ventilation à partir d'un prix HT: tax = round2(base × taux), total = base + tax."""
    base = round2(base_price)
    rate = to_decimal(tax_rate)
    tax = calculate_tax(base, rate)
    return TaxBreakdown(base_price=base, tax_rate=rate, tax_amount=tax, total_price=base + tax)


def get_tax_breakdown_from_total(total_price: Number, tax_rate: Number = DEFAULT_TAX_RATE) -> TaxBreakdown:
    """
    Ventilation inverse à partir d'un prix TTC (chemin principal: le catalogue est TTC).
    base = round2(total / (1 + taux)), tax = total - base.
    """
    total = round2(total_price)
    rate = to_decimal(tax_rate)
    base = calculate_base_price(total, rate)
    return TaxBreakdown(base_price=base, tax_rate=rate, tax_amount=total - base, total_price=total)


def is_price_including_tax(price: Number, tax_rate: Number = DEFAULT_TAX_RATE) -> bool:
    # Heuristique: le prix HT recalculé redonne le TTC au centime près
    base = calculate_base_price(price, tax_rate)
    return abs(calculate_total_with_tax(base, tax_rate) - round2(price)) < CENT


def get_intl_locale(locale: str) -> str:
    return _INTL_LOCALES.get(locale, "en-US")


def format_money(amount: Number, locale: str = "en", currency_symbol: str = "€") -> str:
    thousands, decimal_sep, suffix = _NUMBER_STYLES[get_intl_locale(locale)]
    value = round2(amount)
    sign = "-" if value < 0 else ""
    integer, _, fraction = f"{abs(value):,.2f}".partition(".")
    body = integer.replace(",", thousands) + decimal_sep + fraction
    if suffix:
        return f"{sign}{body} {currency_symbol}"
    return f"{sign}{currency_symbol}{body}"


def format_tax_breakdown(breakdown: TaxBreakdown, locale: str = "en") -> Dict[str, str]:
    percentage = int(round2(breakdown.tax_rate * 100).to_integral_value(rounding=ROUND_HALF_UP))
    return {
        "basePrice": format_money(breakdown.base_price, locale),
        "taxAmount": format_money(breakdown.tax_amount, locale),
        "totalPrice": format_money(breakdown.total_price, locale),
        "taxRate": f"{percentage}%",
        "taxRatePercentage": str(percentage),
    }
