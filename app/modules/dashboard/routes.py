from fastapi import APIRouter, Depends
from app.modules.dashboard.schemas import CompanyDetails, DashboardResponse
from app.modules.dashboard.service import DashboardService
from app.core.dependencies import get_current_user, get_supabase
from supabase import Client
from typing import Dict

router = APIRouter(tags=["dashboard"])


def get_dashboard_service(supabase: Client = Depends(get_supabase)) -> DashboardService:
    return DashboardService(supabase)


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    user_data: Dict = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Sidebar branding plus headline counts for the caller"""
    return DashboardResponse(
        company=service.get_company_details(),
        stats=service.get_stats(user_data["id"])
    )


@router.get("/company", response_model=CompanyDetails)
def get_company(service: DashboardService = Depends(get_dashboard_service)):
    """Branding for the sidebar; public so the auth pages can show it too"""
    return service.get_company_details()
