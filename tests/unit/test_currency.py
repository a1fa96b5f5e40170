from decimal import Decimal

import pytest

from portrait_backend.pricing import currency
from portrait_backend.pricing.currency import CACHE_KEY, CurrencyConverter
from portrait_backend.utils.cache import TTLCache


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def _failing_fetch():
    raise ConnectionError("rate api unreachable")


def test_ttl_cache_freshness_and_stale_value():
    clock = FakeClock()
    cache = TTLCache(60, clock=clock)
    cache.set("k", 1)
    assert cache.get("k") == 1
    clock.now += 61
    assert cache.get("k") is None
    assert cache.get_stale("k") == 1
    cache.clear()
    assert cache.get_stale("k") is None


def test_fresh_cached_rate_skips_fetch():
    calls = []

    def fetch():
        calls.append(1)
        return "40"

    conv = CurrencyConverter(fetch_rate=fetch, cache=TTLCache(3600, clock=FakeClock()))
    assert conv.get_eur_to_try_rate() == Decimal("40")
    assert conv.get_eur_to_try_rate() == Decimal("40")
    assert len(calls) == 1


def test_expired_cache_is_refreshed():
    clock = FakeClock()
    rates = iter(["40", "41"])
    conv = CurrencyConverter(fetch_rate=lambda: next(rates), cache=TTLCache(3600, clock=clock))
    assert conv.get_eur_to_try_rate() == Decimal("40")
    clock.now += 3601
    assert conv.get_eur_to_try_rate() == Decimal("41")


def test_fetch_failure_uses_stale_rate():
    clock = FakeClock()
    cache = TTLCache(3600, clock=clock)
    cache.set(CACHE_KEY, Decimal("39.5"))
    clock.now += 7200
    conv = CurrencyConverter(fetch_rate=_failing_fetch, cache=cache, fallback_rate=36.5)
    assert conv.get_eur_to_try_rate() == Decimal("39.5")


def test_fetch_failure_without_cache_uses_fallback():
    conv = CurrencyConverter(fetch_rate=_failing_fetch, cache=TTLCache(3600), fallback_rate=36.5)
    assert conv.get_eur_to_try_rate() == Decimal("36.5")


@pytest.mark.parametrize("amount,expected", [
    (0, Decimal("36.50")),
    (45, Decimal("1679.00")),
    ("45.55", Decimal("1699.08")),
])
def test_convert_adds_one_euro_buffer(amount, expected):
    conv = CurrencyConverter(fetch_rate=_failing_fetch, cache=TTLCache(3600), fallback_rate=36.5)
    # (amount + 1) * 36.5, arrondi au centime
    assert conv.convert_eur_to_try(amount) == expected


def test_fetch_eur_to_try_rate_parses_api(monkeypatch):
    class _Res:
        def raise_for_status(self):
            return None

        def json(self):
            return {"result": "success", "rates": {"TRY": 37.12}}

    monkeypatch.setattr("portrait_backend.pricing.currency.requests.get", lambda *a, **kw: _Res())
    assert currency.fetch_eur_to_try_rate() == Decimal("37.12")


def test_fetch_eur_to_try_rate_rejects_bad_payload(monkeypatch):
    class _Res:
        def raise_for_status(self):
            return None

        def json(self):
            return {"result": "error"}

    monkeypatch.setattr("portrait_backend.pricing.currency.requests.get", lambda *a, **kw: _Res())
    with pytest.raises(ValueError):
        currency.fetch_eur_to_try_rate()


def test_format_currency_turkish_style():
    assert currency.format_currency(1679, "TRY") == "1.679,00 TRY"
