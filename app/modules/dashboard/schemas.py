from pydantic import BaseModel


class CompanyDetails(BaseModel):
    id: str = ""
    name: str
    email: str
    logo: str


class DashboardStats(BaseModel):
    active_staff_count: int = 0
    pending_requests: int = 0
    completed_hires: int = 0


class DashboardResponse(BaseModel):
    company: CompanyDetails
    stats: DashboardStats
