from supabase import Client
from app.core.errors import error_message
from app.core.formatting import format_date, truncate_text
from app.modules.auth.service import AuthService
from app.modules.interviews.models import INTERVIEWS_TABLE, INTERVIEW_INITIAL_STATUS, INTERVIEW_LIST_COLUMNS
from app.modules.interviews.schemas import InterviewCreate, InterviewResponse, InterviewListItem
from typing import List, Optional
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

NOTES_PREVIEW_LENGTH = 80


def validate_interview_time(value: Optional[datetime], now: Optional[datetime] = None) -> Optional[str]:
    if value is None:
        return "Please select an interview date"
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if value <= now:
        return "Interview date must be in the future"
    return None


def _interview_matches(interview: InterviewListItem, query: str) -> bool:
    order = interview.order
    if order is None:
        return False
    if order.order_number and query in order.order_number.lower():
        return True
    if order.customer_name and query in order.customer_name.lower():
        return True
    return any(
        (staff.name and query in staff.name.lower()) or (staff.role and query in staff.role.lower())
        for staff in order.selected_staff or []
    )


def filter_interviews(
    interviews: List[InterviewListItem],
    status_filter: str = "all",
    search_query: str = ""
) -> List[InterviewListItem]:
    filtered = list(interviews)
    if status_filter != "all":
        filtered = [interview for interview in filtered if interview.status == status_filter]
    if search_query:
        query = search_query.lower()
        filtered = [interview for interview in filtered if _interview_matches(interview, query)]
    return filtered


class InterviewService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.auth = AuthService(supabase)

    def book_interview(self, staff_id: str, token: Optional[str], interview_data: InterviewCreate) -> InterviewResponse:
        """Insert a scheduled interview; like hire requests, resubmitting creates a duplicate row."""
        validation_error = validate_interview_time(interview_data.scheduled_time)
        if validation_error:
            raise HTTPException(status_code=400, detail=validation_error)

        user = self.auth.get_session_user(token)
        if user is None:
            raise HTTPException(status_code=401, detail="You must be logged in to book an interview")

        scheduled_time = interview_data.scheduled_time
        if scheduled_time.tzinfo is None:
            scheduled_time = scheduled_time.replace(tzinfo=timezone.utc)
        insert_data = {
            "staff_id": staff_id,
            "user_id": user["id"],
            "scheduled_time": scheduled_time.isoformat(),
            "service_type": interview_data.service_type,
            "duration": interview_data.duration,
            "notes": interview_data.notes,
            "status": INTERVIEW_INITIAL_STATUS
        }
        try:
            result = self.supabase.table(INTERVIEWS_TABLE).insert(insert_data).execute()
        except Exception as e:
            logger.error(f"Error booking interview for staff {staff_id}: {error_message(e)}")
            raise HTTPException(status_code=500, detail=error_message(e) or "Failed to book interview")

        logger.info(f"Interview booked for staff {staff_id} by user {user['id']}")
        return InterviewResponse(**(result.data[0] if result.data else insert_data))

    def list_interviews(self, user_id: str) -> List[InterviewListItem]:
        """Caller's interviews, most recent first"""
        try:
            result = self.supabase.table(INTERVIEWS_TABLE)\
                .select(INTERVIEW_LIST_COLUMNS)\
                .eq("user_id", user_id)\
                .order("scheduled_time", desc=True)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching interviews: {error_message(e)}")
            raise HTTPException(status_code=500, detail="Failed to load interviews")

        interviews = []
        for row in result.data or []:
            item = InterviewListItem(**row)
            item.scheduled_display = format_date(item.scheduled_time)
            item.notes_preview = truncate_text(item.notes, NOTES_PREVIEW_LENGTH)
            interviews.append(item)
        return interviews
