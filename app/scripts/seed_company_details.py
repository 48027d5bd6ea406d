"""
Seed Company Details Script
Writes the sidebar branding row (company_details) from settings.
Run once per environment, or again after changing the branding settings.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from app.database.supabase_client import SupabaseClient
from app.modules.dashboard.models import COMPANY_DETAILS_TABLE
from app.modules.dashboard.service import default_company_details
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def seed_company_details(supabase: Client) -> str:
    """Update the first branding row, or create it. Returns 'created' or 'updated'."""
    details = default_company_details()
    payload = {"name": details.name, "email": details.email, "logo": details.logo}

    existing = supabase.table(COMPANY_DETAILS_TABLE)\
        .select("id")\
        .limit(1)\
        .execute()

    if existing.data:
        supabase.table(COMPANY_DETAILS_TABLE)\
            .update(payload)\
            .eq("id", existing.data[0]["id"])\
            .execute()
        logger.info(f"Updated company details: {details.name}")
        return "updated"

    supabase.table(COMPANY_DETAILS_TABLE).insert(payload).execute()
    logger.info(f"Created company details: {details.name}")
    return "created"


def main():
    try:
        # company_details is read-only under RLS for portal users
        supabase = SupabaseClient.get_service_client()
        seed_company_details(supabase)
    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
