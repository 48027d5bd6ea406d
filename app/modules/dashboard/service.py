from supabase import Client
from app.config.settings import settings
from app.core.errors import error_message
from app.modules.dashboard.models import COMPANY_DETAILS_TABLE
from app.modules.dashboard.schemas import CompanyDetails, DashboardStats
from app.modules.staff.models import STAFF_TABLE
from app.modules.staff_requests.models import STAFF_SELECTIONS_TABLE, REQUEST_INITIAL_STATUS
from app.modules.interviews.models import INTERVIEWS_TABLE, INTERVIEW_HIRED_STATUS
import logging

logger = logging.getLogger(__name__)


def default_company_details() -> CompanyDetails:
    return CompanyDetails(
        name=settings.default_company_name,
        email=settings.default_company_email,
        logo=settings.default_company_logo
    )


class DashboardService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_company_details(self) -> CompanyDetails:
        """Branding row; any failure falls back to the configured defaults."""
        try:
            result = self.supabase.table(COMPANY_DETAILS_TABLE)\
                .select("*")\
                .limit(1)\
                .single()\
                .execute()
            if not result.data:
                return default_company_details()
            return CompanyDetails(**{**default_company_details().model_dump(), **result.data})
        except Exception as e:
            logger.error(f"Error fetching company details: {error_message(e)}")
            return default_company_details()

    def _count(self, table: str, **filters) -> int:
        query = self.supabase.table(table).select("id", count="exact")
        for column, value in filters.items():
            query = query.eq(column, value)
        result = query.execute()
        return result.count or 0

    def get_stats(self, user_id: str) -> DashboardStats:
        try:
            return DashboardStats(
                active_staff_count=self._count(STAFF_TABLE, status="active"),
                pending_requests=self._count(STAFF_SELECTIONS_TABLE, user_id=user_id, status=REQUEST_INITIAL_STATUS),
                completed_hires=self._count(INTERVIEWS_TABLE, user_id=user_id, status=INTERVIEW_HIRED_STATUS),
            )
        except Exception as e:
            logger.error(f"Error fetching dashboard stats: {error_message(e)}")
            return DashboardStats()
