from fastapi import APIRouter, Depends
from app.modules.interviews.schemas import InterviewCreate, InterviewResponse, InterviewListResponse
from app.modules.interviews.service import InterviewService, filter_interviews
from app.core.dependencies import get_access_token, get_current_user, get_supabase
from supabase import Client
from typing import Dict, Optional

router = APIRouter(tags=["interviews"])


def get_interview_service(supabase: Client = Depends(get_supabase)) -> InterviewService:
    return InterviewService(supabase)


@router.post("/staff/{staff_id}/interviews", response_model=InterviewResponse, status_code=201)
def book_interview(
    staff_id: str,
    interview_data: InterviewCreate,
    token: Optional[str] = Depends(get_access_token),
    service: InterviewService = Depends(get_interview_service)
):
    """Book an interview with a staff member"""
    return service.book_interview(staff_id, token, interview_data)


@router.get("/interviews", response_model=InterviewListResponse)
def list_interviews(
    status: str = "all",
    search: str = "",
    user_data: Dict = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service)
):
    """Hiring pipeline: interviews filtered by status and free text"""
    interviews = filter_interviews(service.list_interviews(user_data["id"]), status, search)
    return InterviewListResponse(total=len(interviews), interviews=interviews)
