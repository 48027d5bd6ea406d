"""
Tests for dashboard stats and sidebar branding.
"""

from unittest.mock import patch

from conftest import FakeAPIError

from app.modules.dashboard.service import DashboardService


def test_stats_count_active_staff_and_callers_records(fake_supabase):
    fake_supabase.seed(
        "staff",
        {"id": "s1", "status": "active"},
        {"id": "s2", "status": "active"},
        {"id": "s3", "status": "inactive"},
    )
    fake_supabase.seed(
        "staff_selections",
        {"id": "r1", "user_id": "user-1", "status": "pending"},
        {"id": "r2", "user_id": "user-1", "status": "approved"},
        {"id": "r3", "user_id": "user-2", "status": "pending"},
    )
    fake_supabase.seed(
        "interviews",
        {"id": "i1", "user_id": "user-1", "status": "hired"},
        {"id": "i2", "user_id": "user-1", "status": "scheduled"},
    )

    stats = DashboardService(fake_supabase).get_stats("user-1")

    assert stats.active_staff_count == 2
    assert stats.pending_requests == 1
    assert stats.completed_hires == 1


def test_stats_fall_back_to_zero(fake_supabase):
    fake_supabase.fail("staff", FakeAPIError("connection reset"))

    stats = DashboardService(fake_supabase).get_stats("user-1")

    assert stats.active_staff_count == 0
    assert stats.pending_requests == 0
    assert stats.completed_hires == 0


def test_company_details_from_table(fake_supabase):
    fake_supabase.seed("company_details", {"id": "c1", "name": "Prime Staffing", "email": "hi@prime.ng", "logo": "P"})

    details = DashboardService(fake_supabase).get_company_details()

    assert details.name == "Prime Staffing"
    assert details.logo == "P"


def test_company_details_default_when_missing(fake_supabase):
    details = DashboardService(fake_supabase).get_company_details()

    assert details.name == "FGS Staffing"
    assert details.email == "client@fgstaffing.com"
    assert details.logo == "F"


def test_company_details_default_on_error(fake_supabase):
    fake_supabase.fail("company_details", FakeAPIError('relation "public.company_details" does not exist', code="42P01"))

    with patch("app.modules.dashboard.service.settings.default_company_name", "Acme Staffing"):
        details = DashboardService(fake_supabase).get_company_details()

    assert details.name == "Acme Staffing"


def test_dashboard_endpoint(client, signed_in, auth_headers):
    signed_in.seed("staff", {"id": "s1", "status": "active"})

    response = client.get("/api/v1/dashboard", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["stats"]["active_staff_count"] == 1
    assert data["company"]["name"] == "FGS Staffing"


def test_company_endpoint_is_public(client):
    response = client.get("/api/v1/company")

    assert response.status_code == 200
    assert response.json()["logo"] == "F"
