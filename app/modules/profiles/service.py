from supabase import Client
from app.core.errors import ErrorKind, classify_error, error_message
from app.modules.profiles.models import CLIENT_TABLE
from app.modules.profiles.schemas import UserProfile, ProfileUpdate, ProfileCompletionRequest
from app.modules.profiles.mapper import (
    build_profile, fallback_profile, default_client_row, profile_to_client_update
)
from app.modules.session.schemas import ActionResult
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


def validate_completion_form(form: ProfileCompletionRequest) -> Optional[str]:
    """Return the message to show inline, or None when the wizard can be submitted."""
    if not form.name or not form.phone or not form.address or not form.client_type:
        return "Please complete all required fields"
    if form.client_type == "company" and not form.company_name:
        return "Please provide your company name"
    return None


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def load_profile(self, user: Dict[str, Any]) -> UserProfile:
        """
        Load the client row for an authenticated user.

        Lookup problems never block the user: a missing table or unreadable row
        yields a fallback profile flagged complete. A missing row on an existing
        table is created with defaults and flagged incomplete so the completion
        wizard runs on first login.
        """
        email = user.get("email") or ""
        try:
            result = self.supabase.table(CLIENT_TABLE)\
                .select("*")\
                .eq("id", user["id"])\
                .single()\
                .execute()
        except Exception as e:
            kind = classify_error(e)
            if kind == ErrorKind.SCHEMA_MISMATCH:
                logger.warning(f"Client table unavailable, using basic profile for {user['id']}: {error_message(e)}")
                return fallback_profile(user)
            if kind == ErrorKind.NOT_FOUND:
                return self._create_default_profile(user)
            logger.error(f"Error fetching client data for {user['id']}: {error_message(e)}")
            return fallback_profile(user)

        if not result.data:
            logger.info(f"Client data is null for user {user['id']}")
            return fallback_profile(user)

        try:
            return build_profile(result.data, email)
        except Exception as e:
            logger.error(f"Error processing client data for {user['id']}: {e}")
            return fallback_profile(user)

    def _create_default_profile(self, user: Dict[str, Any]) -> UserProfile:
        logger.info(f"Creating new client record for auth user {user['id']}")
        try:
            result = self.supabase.table(CLIENT_TABLE)\
                .insert(default_client_row(user))\
                .execute()
            record = result.data[0] if result.data else default_client_row(user)
            return build_profile(record, user.get("email") or "", completed=False)
        except Exception as e:
            logger.error(f"Error creating client record for {user['id']}: {error_message(e)}")
            return fallback_profile(user)

    def update_profile(self, user_id: str, profile: ProfileUpdate) -> ActionResult:
        """Insert or update the client row. Concurrent writers race; the last write wins."""
        client_data = profile_to_client_update(profile)
        try:
            self.supabase.table(CLIENT_TABLE)\
                .select("id")\
                .eq("id", user_id)\
                .single()\
                .execute()
        except Exception as e:
            if classify_error(e) == ErrorKind.NOT_FOUND:
                return self._insert_client(user_id, client_data)
            logger.warning(f"Could not check client record for {user_id}, attempting update: {error_message(e)}")

        if not client_data:
            return ActionResult(success=True)
        try:
            self.supabase.table(CLIENT_TABLE)\
                .update(client_data)\
                .eq("id", user_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating client record for {user_id}: {error_message(e)}")
            return ActionResult(success=False, error=error_message(e))
        return ActionResult(success=True)

    def _insert_client(self, user_id: str, client_data: Dict[str, Any]) -> ActionResult:
        try:
            self.supabase.table(CLIENT_TABLE).insert({
                "id": user_id,
                **client_data,
                "status": "active"
            }).execute()
        except Exception as e:
            logger.error(f"Error creating client record for {user_id}: {error_message(e)}")
            return ActionResult(success=False, error=error_message(e))
        return ActionResult(success=True)
