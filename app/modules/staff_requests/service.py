from supabase import Client
from app.core.errors import error_message
from app.modules.auth.service import AuthService
from app.modules.staff.service import StaffService, to_card
from app.modules.staff_requests.models import STAFF_SELECTIONS_TABLE, REQUEST_INITIAL_STATUS
from app.modules.staff_requests.schemas import StaffRequestCreate, StaffRequestResponse, StaffRequestContext
from typing import Optional, Union
from fastapi import HTTPException
from datetime import date, datetime, time, timezone
import logging

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "This staff member is not available for requests"


def start_date_of(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def validate_preferred_start_date(value: Optional[Union[date, datetime]], today: Optional[date] = None) -> Optional[str]:
    if value is None:
        return "Please select a preferred start date"
    value = start_date_of(value)
    today = today or datetime.now(timezone.utc).date()
    if value <= today:
        return "Preferred start date must be in the future"
    return None


class StaffRequestService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.auth = AuthService(supabase)
        self.staff = StaffService(supabase)

    def get_request_context(self, staff_id: str) -> StaffRequestContext:
        """Staff summary for the request form, flagged when the person can't be requested."""
        person = self.staff.get_staff(staff_id)
        available = bool(person.availability)
        return StaffRequestContext(
            staff=to_card(person),
            available=available,
            error=None if available else UNAVAILABLE_MESSAGE
        )

    def create_request(self, staff_id: str, token: Optional[str], request_data: StaffRequestCreate) -> StaffRequestResponse:
        """
        Insert a pending staff selection.

        The date is checked before any network call and the session is looked up
        again right before the insert. There is no idempotency key, so a repeated
        submission creates another row.
        """
        validation_error = validate_preferred_start_date(request_data.preferred_start_date)
        if validation_error:
            raise HTTPException(status_code=400, detail=validation_error)

        person = self.staff.get_staff(staff_id)
        if not person.availability:
            raise HTTPException(status_code=400, detail=UNAVAILABLE_MESSAGE)

        user = self.auth.get_session_user(token)
        if user is None:
            raise HTTPException(status_code=401, detail="You must be logged in to make a request")

        start = datetime.combine(start_date_of(request_data.preferred_start_date), time.min, tzinfo=timezone.utc)
        insert_data = {
            "staff_id": staff_id,
            "user_id": user["id"],
            "service_type": request_data.service_type,
            "duration": request_data.duration,
            "preferred_start_date": start.isoformat(),
            "additional_info": request_data.additional_info,
            "status": REQUEST_INITIAL_STATUS
        }
        try:
            result = self.supabase.table(STAFF_SELECTIONS_TABLE).insert(insert_data).execute()
        except Exception as e:
            logger.error(f"Error requesting staff {staff_id}: {error_message(e)}")
            raise HTTPException(status_code=500, detail=error_message(e) or "Failed to submit request")

        logger.info(f"Staff request created for staff {staff_id} by user {user['id']}")
        return StaffRequestResponse(**(result.data[0] if result.data else insert_data))
