from decimal import Decimal

import pytest

from portrait_backend.pricing.tax import (
    calculate_base_price,
    calculate_tax,
    calculate_total_with_tax,
    format_money,
    format_tax_breakdown,
    get_tax_breakdown,
    get_tax_breakdown_from_total,
    is_price_including_tax,
    round2,
)
from portrait_backend.pricing.catalog import PACKAGE_PRICES


def test_essential_breakdown_at_twenty_percent():
    b = get_tax_breakdown_from_total(150, Decimal("0.20"))
    assert b.base_price == Decimal("125.00")
    assert b.tax_amount == Decimal("25.00")
    assert b.total_price == Decimal("150.00")


def test_round_half_away_from_zero():
    assert round2("2.675") == Decimal("2.68")
    assert round2("-2.675") == Decimal("-2.68")
    assert round2(0.1 + 0.2) == Decimal("0.30")


@pytest.mark.parametrize("package_id", sorted(PACKAGE_PRICES))
@pytest.mark.parametrize("rate", ["0", "0.08", "0.18", "0.20", "1"])
def test_base_plus_tax_equals_total_exactly(package_id, rate):
    b = get_tax_breakdown_from_total(PACKAGE_PRICES[package_id], Decimal(rate))
    assert b.base_price + b.tax_amount == b.total_price


@pytest.mark.parametrize("base", ["0", "0.01", "99.99", "125", "333.33", "1234.56"])
@pytest.mark.parametrize("rate", ["0", "0.18", "0.20", "0.5", "1"])
def test_round_trip_from_base_stays_within_a_cent(base, rate):
    total = get_tax_breakdown(Decimal(base), Decimal(rate)).total_price
    back = get_tax_breakdown_from_total(total, Decimal(rate)).base_price
    assert abs(back - Decimal(base)) <= Decimal("0.01")


def test_helpers_are_consistent():
    assert calculate_tax(100, "0.20") == Decimal("20.00")
    assert calculate_total_with_tax(100, "0.20") == Decimal("120.00")
    assert calculate_base_price(120, "0.20") == Decimal("100.00")
    assert is_price_including_tax(150, "0.20") is True


def test_format_money_per_locale():
    assert format_money(1234.5, "en") == "€1,234.50"
    assert format_money(1234.5, "ru") == "1 234,50 €"
    assert format_money(1234.5, "es") == "1.234,50 €"
    # locale inconnue -> en-US
    assert format_money(10, "xx") == "€10.00"


def test_format_tax_breakdown():
    formatted = format_tax_breakdown(get_tax_breakdown_from_total(150, "0.20"), "en")
    assert formatted["basePrice"] == "€125.00"
    assert formatted["taxRate"] == "20%"
