from pydantic import BaseModel
from typing import Any, List, Literal, Optional
from datetime import datetime


class StaffSummary(BaseModel):
    id: str
    name: Optional[str] = None
    role: Optional[str] = None
    experience: Optional[float] = None
    salary: Optional[float] = None
    availability: Optional[bool] = None  # nullable column; only True counts as available
    image_url: Optional[str] = None
    location: Optional[str] = None
    skills: Optional[List[str]] = None


class StaffCard(StaffSummary):
    initials: str
    salary_display: str


class StaffDetail(StaffSummary):
    status: Optional[str] = None
    verified: Optional[bool] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    marital_status: Optional[str] = None
    education_background: Optional[Any] = None
    work_history: Optional[Any] = None
    created_at: Optional[datetime] = None


class StaffDetailResponse(StaffDetail):
    initials: str
    salary_display: str


class StaffDirectoryResponse(BaseModel):
    total: int
    search: str
    filter: Literal["all", "available"]
    staff: List[StaffCard]
