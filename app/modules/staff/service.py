from supabase import Client
from app.core.errors import ErrorKind, classify_error, error_message
from app.core.formatting import format_currency, get_initials
from app.modules.staff.models import STAFF_TABLE, DIRECTORY_COLUMNS
from app.modules.staff.schemas import StaffSummary, StaffCard, StaffDetail, StaffDetailResponse
from typing import List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def _matches(person: StaffSummary, term: str) -> bool:
    fields = (person.name, person.role, person.location)
    if any(value and term in value.lower() for value in fields):
        return True
    return any(term in skill.lower() for skill in (person.skills or []))


def filter_staff(staff: List[StaffSummary], search_term: str = "", filter_type: str = "all") -> List[StaffSummary]:
    """
    Case-insensitive match on name, role, location or any skill, then the availability toggle.
    An empty term with the 'all' filter hands back the input list itself.
    """
    result = staff
    if search_term:
        term = search_term.lower()
        result = [person for person in result if _matches(person, term)]
    if filter_type == "available":
        result = [person for person in result if person.availability is True]
    return result


def to_card(person: StaffSummary) -> StaffCard:
    return StaffCard(
        **person.model_dump(),
        initials=get_initials(person.name, fallback="NA"),
        salary_display=format_currency(person.salary),
    )


class StaffService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_active(self) -> List[StaffSummary]:
        """Whole active directory; volumes are small so there is no pagination."""
        try:
            result = self.supabase.table(STAFF_TABLE)\
                .select(DIRECTORY_COLUMNS)\
                .eq("status", "active")\
                .execute()
            staff = [StaffSummary(**row) for row in (result.data or [])]
            logger.info(f"Fetched {len(staff)} staff records")
            return staff
        except Exception as e:
            logger.error(f"Error fetching staff: {error_message(e)}")
            raise HTTPException(status_code=500, detail="Failed to load staff")

    def get_staff(self, staff_id: str) -> StaffDetail:
        try:
            result = self.supabase.table(STAFF_TABLE)\
                .select("*")\
                .eq("id", staff_id)\
                .single()\
                .execute()
        except Exception as e:
            if classify_error(e) == ErrorKind.NOT_FOUND:
                raise HTTPException(status_code=404, detail="Staff member not found")
            logger.error(f"Error fetching staff details for {staff_id}: {error_message(e)}")
            raise HTTPException(status_code=500, detail=error_message(e) or "Failed to load staff details")

        if not result.data:
            raise HTTPException(status_code=404, detail="Staff member not found")
        return StaffDetail(**result.data)

    def get_staff_detail(self, staff_id: str) -> StaffDetailResponse:
        person = self.get_staff(staff_id)
        return StaffDetailResponse(
            **person.model_dump(),
            initials=get_initials(person.name, fallback="NA"),
            salary_display=format_currency(person.salary),
        )
