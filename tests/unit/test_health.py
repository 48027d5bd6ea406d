"""
Tests for the service probes and response headers.
"""

import inspect

from conftest import FakeAPIError
from fastapi.routing import APIRoute

from app.main import app


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_ready(client):
    assert client.get("/ready").json() == {"status": "ready"}


def test_security_headers(client):
    response = client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_ready_reports_unavailable_backend(client, fake_supabase):
    fake_supabase.fail("company_details", FakeAPIError("connection refused"))

    response = client.get("/ready")

    assert response.status_code == 503
    assert response.json() == {"status": "unavailable"}


def test_referrer_policy_header(client):
    assert client.get("/").headers["Referrer-Policy"] == "strict-origin-when-cross-origin"


def test_data_endpoints_run_in_threadpool():
    # Supabase calls block, so handlers that make them must be plain functions
    blocking = [
        route.path
        for route in app.routes
        if isinstance(route, APIRoute)
        and (route.path.startswith("/api/v1") or route.path == "/ready")
        and inspect.iscoroutinefunction(route.endpoint)
    ]

    assert blocking == []
