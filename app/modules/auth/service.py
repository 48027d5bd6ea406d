from supabase import Client
from app.config.settings import settings
from app.core.errors import error_message
from app.modules.auth.models import EMAIL_CALLBACK_PATH
from fastapi import HTTPException
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


def user_to_dict(user: Any) -> Dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "user_metadata": user.user_metadata or {},
        "app_metadata": user.app_metadata or {},
        "created_at": user.created_at,
        "updated_at": user.updated_at
    }


class AuthService:
    """Thin wrapper over Supabase Auth; callers decide how failures surface."""

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def sign_in(self, email: str, password: str):
        return self.supabase.auth.sign_in_with_password({
            "email": email,
            "password": password
        })

    def sign_up(self, email: str, password: str, name: str, phone: str):
        return self.supabase.auth.sign_up({
            "email": email,
            "password": password,
            "options": {
                "email_redirect_to": f"{settings.site_url.rstrip('/')}{EMAIL_CALLBACK_PATH}",
                "data": {
                    "name": name,
                    "phone": phone
                }
            }
        })

    def sign_out(self, token: Optional[str]) -> bool:
        """Revoke the refresh tokens behind the caller's own access token."""
        if not token:
            return False
        try:
            self.supabase.auth.admin.sign_out(token)
            return True
        except Exception as e:
            logger.warning(f"Sign out failed: {error_message(e)}")
            return False

    def get_session_user(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        """Resolve the user behind an access token, or None when there is no valid session."""
        if not token:
            return None
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            logger.info(f"Session lookup failed: {error_message(e)}")
            return None
        if not user_response or not user_response.user:
            return None
        return user_to_dict(user_response.user)

    def get_current_user(self, token: Optional[str]) -> Dict[str, Any]:
        """Like get_session_user but raises 401 for route protection."""
        user_data = self.get_session_user(token)
        if user_data is None:
            raise HTTPException(status_code=401, detail="Invalid or expired token")
        return user_data
