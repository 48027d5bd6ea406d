from fastapi import APIRouter, Depends, Query
from app.modules.staff.schemas import StaffDirectoryResponse, StaffDetailResponse
from app.modules.staff.service import StaffService, filter_staff, to_card
from app.core.dependencies import get_current_user, get_supabase
from supabase import Client
from typing import Dict, Literal

router = APIRouter(prefix="/staff", tags=["staff"])


def get_staff_service(supabase: Client = Depends(get_supabase)) -> StaffService:
    return StaffService(supabase)


@router.get("", response_model=StaffDirectoryResponse)
def list_staff(
    search: str = "",
    filter: Literal["all", "available"] = Query("all"),
    user_data: Dict = Depends(get_current_user),
    service: StaffService = Depends(get_staff_service)
):
    """Active staff directory, filtered by free text and availability"""
    staff = filter_staff(service.list_active(), search, filter)
    return StaffDirectoryResponse(
        total=len(staff),
        search=search,
        filter=filter,
        staff=[to_card(person) for person in staff]
    )


@router.get("/{staff_id}", response_model=StaffDetailResponse)
def get_staff(
    staff_id: str,
    user_data: Dict = Depends(get_current_user),
    service: StaffService = Depends(get_staff_service)
):
    """Full staff profile"""
    return service.get_staff_detail(staff_id)
