"""
Module 'pricing' (feature-first): point d'entrée public.
Réunit catalogue, TVA, tarification des formules et conversion de devise.
"""

from .catalog import PACKAGE_PRICES, package_ids, is_per_person, get_display_name
from .tax import (
    TAX_RATES,
    TaxBreakdown,
    round2,
    calculate_tax,
    calculate_total_with_tax,
    calculate_base_price,
    get_tax_breakdown,
    get_tax_breakdown_from_total,
    is_price_including_tax,
)
from .service import (
    DEPOSIT_PERCENTAGE,
    PriceBreakdown,
    get_package_pricing,
    amount_matches,
    format_package_pricing,
    calculate_multi_package_total,
    validate_package_price,
)
from .currency import CurrencyConverter, convert_eur_to_try, get_eur_to_try_rate

__all__ = [
    # catalog
    "PACKAGE_PRICES",
    "package_ids",
    "is_per_person",
    "get_display_name",
    # tax
    "TAX_RATES",
    "TaxBreakdown",
    "round2",
    "calculate_tax",
    "calculate_total_with_tax",
    "calculate_base_price",
    "get_tax_breakdown",
    "get_tax_breakdown_from_total",
    "is_price_including_tax",
    # service
    "DEPOSIT_PERCENTAGE",
    "PriceBreakdown",
    "get_package_pricing",
    "amount_matches",
    "format_package_pricing",
    "calculate_multi_package_total",
    "validate_package_price",
    # currency
    "CurrencyConverter",
    "convert_eur_to_try",
    "get_eur_to_try_rate",
]
