from pydantic import BaseModel
from typing import Optional, Union
from datetime import date, datetime
from app.modules.staff.schemas import StaffCard


class StaffRequestCreate(BaseModel):
    service_type: str = "full-time"
    duration: str = "1-month"
    # Optional so a missing date is reported with the form message rather than a schema error.
    # Browsers may send a full ISO timestamp; only its date part is used.
    preferred_start_date: Optional[Union[date, datetime]] = None
    additional_info: str = ""


class StaffRequestResponse(BaseModel):
    id: Optional[str] = None
    staff_id: str
    user_id: str
    service_type: str
    duration: str
    preferred_start_date: datetime
    additional_info: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None


class StaffRequestContext(BaseModel):
    staff: StaffCard
    available: bool
    error: Optional[str] = None
