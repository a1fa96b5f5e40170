import time
from unittest.mock import MagicMock

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from portrait_backend.app_setup.exceptions import register_exception_handlers
from portrait_backend.utils import rate_limit


def _request(headers):
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
    }
    return Request(scope)


@pytest.mark.parametrize("headers,expected", [
    ({"x-forwarded-for": "1.1.1.1, 10.0.0.1"}, "1.1.1.1"),
    ({"cf-connecting-ip": "2.2.2.2", "x-real-ip": "3.3.3.3"}, "2.2.2.2"),
    ({"x-real-ip": "3.3.3.3"}, "3.3.3.3"),
    ({}, "127.0.0.1"),
])
def test_get_client_ip(headers, expected):
    assert rate_limit.get_client_ip(_request(headers)) == expected


def test_storage_failure_fails_open(monkeypatch):
    broken = MagicMock()
    broken.table.side_effect = RuntimeError("db down")
    monkeypatch.setattr("portrait_backend.infra.supabase_client.get_service_supabase", lambda: broken)
    res = rate_limit.check_rate_limit("1.1.1.1:/api/checkout", max_requests=5, window_seconds=60)
    assert res["success"] is True
    assert res["remaining"] == 4


def test_first_request_opens_a_window(monkeypatch):
    client = MagicMock()
    client.table.return_value.select.return_value.eq.return_value.gte.return_value.limit.return_value.execute.return_value = MagicMock(data=[])
    monkeypatch.setattr("portrait_backend.infra.supabase_client.get_service_supabase", lambda: client)

    res = rate_limit.check_rate_limit("ip:/x", max_requests=3, window_seconds=60)

    assert res["success"] is True
    inserted = client.table.return_value.insert.call_args.args[0]
    assert inserted["identifier"] == "ip:/x"
    assert inserted["count"] == 1


def test_full_window_blocks(monkeypatch):
    client = MagicMock()
    row = {"id": 1, "count": 3, "window_start": "2026-10-19T12:00:00+00:00"}
    client.table.return_value.select.return_value.eq.return_value.gte.return_value.limit.return_value.execute.return_value = MagicMock(data=[row])
    monkeypatch.setattr("portrait_backend.infra.supabase_client.get_service_supabase", lambda: client)

    res = rate_limit.check_rate_limit("ip:/x", max_requests=3, window_seconds=60)

    assert res["success"] is False
    assert res["remaining"] == 0
    client.table.return_value.update.assert_not_called()


@pytest.fixture
def limited_app():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/limited", dependencies=[Depends(rate_limit.optional_rate_limit(2, 60))])
    def limited():
        return {"ok": True}

    return app


def test_dependency_returns_429_with_headers(monkeypatch, limited_app):
    reset = int(time.time() * 1000) + 30_000
    monkeypatch.setattr(rate_limit, "check_rate_limit", lambda *a, **kw: {"success": False, "remaining": 0, "reset_time": reset})
    limited_app.state.rate_limit_enabled = True

    with TestClient(limited_app) as c:
        r = c.get("/limited")

    assert r.status_code == 429
    assert r.json()["error"] == "Too many requests. Please try again later."
    assert 1 <= int(r.headers["Retry-After"]) <= 30
    assert r.headers["X-RateLimit-Reset"] == str(reset)


def test_dependency_skipped_when_disabled(monkeypatch, limited_app):
    check = MagicMock()
    monkeypatch.setattr(rate_limit, "check_rate_limit", check)
    limited_app.state.rate_limit_enabled = False

    with TestClient(limited_app) as c:
        assert c.get("/limited").status_code == 200
    check.assert_not_called()
