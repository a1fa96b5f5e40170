import os

# Avant l'import de l'app: le lifespan lit ce flag
os.environ.setdefault("DISABLE_RATE_LIMIT_FOR_TESTS", "1")
# Hôte par défaut de TestClient
os.environ["ALLOWED_HOSTS"] = "localhost,127.0.0.1,testserver"

import pytest
import requests
from typing import Generator
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from portrait_backend.app import app as fastapi_app
import portrait_backend.payments as payments


# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(scope="session")
def app():
    return fastapi_app


@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


# Mock database dependency for all tests
@pytest.fixture(scope="function", autouse=True)
def mock_db_dependency(monkeypatch):
    """Aucun test ne parle à Supabase: les deux clients sont des MagicMock."""
    monkeypatch.setattr("portrait_backend.infra.supabase_client.get_supabase", lambda: MagicMock())
    monkeypatch.setattr("portrait_backend.infra.supabase_client.get_service_supabase", lambda: MagicMock())


@pytest.fixture(autouse=True)
def no_network(monkeypatch):
    # Tout appel HTTP non simulé échoue immédiatement
    def _blocked(self, method, url, *args, **kwargs):
        raise RuntimeError(f"network disabled in tests: {method} {url}")
    monkeypatch.setattr(requests.sessions.Session, "request", _blocked)


@pytest.fixture(autouse=True)
def fresh_providers():
    # Les adaptateurs sont recréés par test (config monkeypatchée prise en compte)
    payments._providers.clear()
    yield
    payments._providers.clear()


@pytest.fixture
def booking_payload():
    return {
        "packageId": "essential",
        "customerName": "Jane Doe",
        "customerEmail": "jane@example.com",
        "customerPhone": "+905551112233",
        "bookingDate": "2026-06-15",
        "bookingTime": "10:00",
        "totalAmount": 150,
    }


@pytest.fixture
def demo_card():
    return {
        "cardHolderName": "Jane Doe",
        "cardNumber": "5528 7900 0000 0008",
        "expireMonth": "12",
        "expireYear": "2030",
        "cvc": "123",
    }


@pytest.fixture
def fake_repo(monkeypatch):
    """
    Dépôt 'bookings' simulé pour les tests de routes: chaque fonction est un MagicMock
    qui renvoie une ligne plausible (id 'b1').
    """
    import portrait_backend.bookings.repository as repository

    fake = MagicMock()
    fake.create_or_update_booking.side_effect = lambda booking_id, fields: {"id": booking_id or "b1", **fields}
    fake.insert_booking.side_effect = lambda fields: {"id": "b1", **fields}
    fake.insert_payment.return_value = {"id": "p1"}
    fake.upsert_customer.return_value = {"id": "c1"}
    fake.find_recent_duplicate.return_value = False
    fake.find_payment_by_order.return_value = None
    fake.fetch_abandoned_drafts.return_value = []
    for name in (
        "upsert_customer", "create_or_update_booking", "insert_booking", "insert_payment",
        "find_recent_duplicate", "find_payment_by_order", "update_payment", "get_booking",
        "update_booking", "fetch_abandoned_drafts", "has_later_conversion", "mark_abandoned_email_sent",
    ):
        monkeypatch.setattr(repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def demo_iyzico(monkeypatch):
    # Sans clés: l'adaptateur Iyzico fonctionne en mode démo
    monkeypatch.setattr("portrait_backend.config.IYZICO_API_KEY", "")
    monkeypatch.setattr("portrait_backend.config.IYZICO_SECRET_KEY", "")
    payments._providers.clear()
