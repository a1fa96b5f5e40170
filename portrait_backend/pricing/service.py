"""
Tarification des formules: remise saisonnière, prix par personne, acompte.

Les prix du catalogue sont TTC; la ventilation passe par get_tax_breakdown_from_total.
"""
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Union

from .catalog import get_display_name, get_package_price, is_per_person
from .tax import (
    DEFAULT_TAX_RATE,
    CENT,
    Number,
    TaxBreakdown,
    format_money,
    format_tax_breakdown,
    get_tax_breakdown_from_total,
    round2,
    to_decimal,
)

# Basse saison: janvier à avril (mois 1..4), -33%
SEASONAL_DISCOUNTS = [
    {"start_month": 1, "end_month": 4, "discount_percentage": Decimal("0.33")},
]
DEPOSIT_PERCENTAGE = Decimal("0.30")
AMOUNT_TOLERANCE = CENT

DateLike = Union[date, datetime, str, None]


@dataclass(frozen=True)
class PriceBreakdown(TaxBreakdown):
    package_id: str = ""
    display_name: str = ""
    original_price: Decimal = Decimal("0")
    discount_amount: Decimal = Decimal("0")
    is_discounted: bool = False
    applied_discount_percentage: Decimal = Decimal("0")
    deposit_amount: Decimal = Decimal("0")
    remaining_amount: Decimal = Decimal("0")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "packageId": self.package_id,
            "displayName": self.display_name,
            "originalPrice": float(self.original_price),
            "discountAmount": float(self.discount_amount),
            "isDiscounted": self.is_discounted,
            "appliedDiscountPercentage": float(self.applied_discount_percentage),
            "depositAmount": float(self.deposit_amount),
            "remainingAmount": float(self.remaining_amount),
        })
        return data


def _parse_date(value: DateLike) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
    except ValueError:
        return None


def get_discount_percentage(booking_date: DateLike) -> Decimal:
    parsed = _parse_date(booking_date)
    if parsed is None:
        return Decimal("0")
    for rule in SEASONAL_DISCOUNTS:
        if rule["start_month"] <= parsed.month <= rule["end_month"]:
            return rule["discount_percentage"]
    return Decimal("0")


def calculate_discounted_price(price: Number, booking_date: DateLike = None) -> Dict[str, Any]:
    original = round2(price)
    percentage = get_discount_percentage(booking_date)
    discount = round2(original * percentage)
    return {
        "price": original - discount,
        "original_price": original,
        "discount_percentage": percentage,
        "discount_amount": discount,
        "is_discounted": percentage > 0,
    }


def get_package_pricing(
    package_id: str,
    tax_rate: Number = DEFAULT_TAX_RATE,
    booking_date: DateLike = None,
    people_count: Optional[int] = None,
) -> PriceBreakdown:
    """
    Ventilation complète d'une formule.
    - rooftop avec people_count >= 1: remise appliquée au prix unitaire, puis × people_count
    - sinon: remise appliquée au prix de la formule
    - acompte = round2(total × 30%), reste = total - acompte
    Un package_id inconnu lève KeyError.
    """
    unit_price = get_package_price(package_id)
    discounted = calculate_discounted_price(unit_price, booking_date)

    if is_per_person(package_id) and people_count and people_count >= 1:
        original_total = round2(unit_price * people_count)
        total = round2(discounted["price"] * people_count)
    else:
        original_total = round2(unit_price)
        total = discounted["price"]

    breakdown = get_tax_breakdown_from_total(total, tax_rate)
    deposit = round2(total * DEPOSIT_PERCENTAGE)
    return PriceBreakdown(
        base_price=breakdown.base_price,
        tax_rate=breakdown.tax_rate,
        tax_amount=breakdown.tax_amount,
        total_price=breakdown.total_price,
        package_id=package_id,
        display_name=get_display_name(package_id),
        original_price=original_total,
        discount_amount=original_total - total,
        is_discounted=discounted["is_discounted"],
        applied_discount_percentage=discounted["discount_percentage"],
        deposit_amount=deposit,
        remaining_amount=round2(total - deposit),
    )


def amount_matches(submitted: Number, expected: Number) -> bool:
    """Montant client accepté à 0.01 près du montant recalculé."""
    return abs(round2(submitted) - round2(expected)) <= AMOUNT_TOLERANCE


def format_package_pricing(
    package_id: str,
    locale: str = "en",
    tax_rate: Number = DEFAULT_TAX_RATE,
    booking_date: DateLike = None,
    people_count: Optional[int] = None,
) -> Dict[str, Any]:
    breakdown = get_package_pricing(package_id, tax_rate, booking_date, people_count)
    formatted = format_tax_breakdown(breakdown, locale)
    formatted.update({
        "packageId": breakdown.package_id,
        "displayName": breakdown.display_name,
        "originalPrice": format_money(breakdown.original_price, locale),
        "discountAmount": format_money(breakdown.discount_amount, locale),
        "isDiscounted": breakdown.is_discounted,
        "appliedDiscountPercentage": float(breakdown.applied_discount_percentage),
        "depositAmount": format_money(breakdown.deposit_amount, locale),
        "remainingAmount": format_money(breakdown.remaining_amount, locale),
    })
    return formatted


def calculate_multi_package_total(package_ids: Iterable[str], tax_rate: Number = DEFAULT_TAX_RATE) -> TaxBreakdown:
    breakdowns: List[PriceBreakdown] = [get_package_pricing(pid, tax_rate) for pid in package_ids]
    return TaxBreakdown(
        base_price=round2(sum((b.base_price for b in breakdowns), Decimal("0"))),
        tax_rate=to_decimal(tax_rate),
        tax_amount=round2(sum((b.tax_amount for b in breakdowns), Decimal("0"))),
        total_price=round2(sum((b.total_price for b in breakdowns), Decimal("0"))),
    )


def validate_package_price(package_id: str, tax_rate: Number = DEFAULT_TAX_RATE) -> bool:
    try:
        breakdown = get_package_pricing(package_id, tax_rate)
    except KeyError:
        return False
    return abs(breakdown.base_price + breakdown.tax_amount - breakdown.total_price) < CENT
