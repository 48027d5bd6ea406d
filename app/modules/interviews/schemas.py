from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class InterviewCreate(BaseModel):
    service_type: str = "full-time"
    duration: str = "1-month"
    # Optional so a missing date is reported with the form message rather than a schema error
    scheduled_time: Optional[datetime] = None
    notes: str = ""


class InterviewResponse(BaseModel):
    id: Optional[str] = None
    staff_id: str
    user_id: str
    scheduled_time: datetime
    service_type: str
    duration: str
    notes: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None


class SelectedStaff(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    location: Optional[str] = None
    image: Optional[str] = None


class InterviewOrder(BaseModel):
    id: Optional[str] = None
    order_number: Optional[str] = None
    customer_name: Optional[str] = None
    selected_staff: Optional[List[SelectedStaff]] = None


class InterviewListItem(BaseModel):
    id: str
    status: Optional[str] = None
    scheduled_time: Optional[datetime] = None
    notes: Optional[str] = None
    order: Optional[InterviewOrder] = None
    scheduled_display: str = ""
    notes_preview: str = ""


class InterviewListResponse(BaseModel):
    total: int
    interviews: List[InterviewListItem]
