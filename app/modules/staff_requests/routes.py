from fastapi import APIRouter, Depends
from app.modules.staff_requests.schemas import StaffRequestCreate, StaffRequestResponse, StaffRequestContext
from app.modules.staff_requests.service import StaffRequestService
from app.core.dependencies import get_access_token, get_current_user, get_supabase
from supabase import Client
from typing import Dict, Optional

router = APIRouter(prefix="/staff", tags=["staff-requests"])


def get_staff_request_service(supabase: Client = Depends(get_supabase)) -> StaffRequestService:
    return StaffRequestService(supabase)


@router.get("/{staff_id}/request", response_model=StaffRequestContext)
def get_request_form(
    staff_id: str,
    user_data: Dict = Depends(get_current_user),
    service: StaffRequestService = Depends(get_staff_request_service)
):
    """Staff summary and availability for the hire request form"""
    return service.get_request_context(staff_id)


@router.post("/{staff_id}/requests", response_model=StaffRequestResponse, status_code=201)
def create_staff_request(
    staff_id: str,
    request_data: StaffRequestCreate,
    token: Optional[str] = Depends(get_access_token),
    service: StaffRequestService = Depends(get_staff_request_service)
):
    """Request to hire a staff member"""
    return service.create_request(staff_id, token, request_data)
