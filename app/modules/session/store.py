"""
Session store: the current user's profile plus authentication, loading and error flags.

One store is built per request from the caller's access token. Every action
updates the state, refreshes the profile on success, and reports failures as
an ActionResult with a short message instead of raising.
"""

from supabase import Client
from app.core.errors import ErrorKind, classify_error, error_message
from app.database.supabase_client import authorize
from app.modules.auth.service import AuthService
from app.modules.profiles.models import CLIENT_TABLE
from app.modules.profiles.schemas import ProfileUpdate
from app.modules.profiles.service import ProfileService
from app.modules.session.schemas import ActionResult, SessionState
from typing import Optional
import logging

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred"
UPDATE_FAILED = "Failed to update profile"
NOT_AUTHENTICATED = "Not authenticated"


class SessionStore:
    def __init__(self, supabase: Client, access_token: Optional[str] = None):
        self.supabase = supabase
        self.auth = AuthService(supabase)
        self.profiles = ProfileService(supabase)
        self.state = SessionState(access_token=access_token)

    def _start(self):
        self.state.is_loading = True
        self.state.error = None

    def _fail(self, message: str) -> ActionResult:
        self.state.is_loading = False
        self.state.error = message
        return ActionResult(success=False, error=message)

    def _reset(self, error: Optional[str] = None):
        self.state = SessionState(
            user=None,
            is_loading=False,
            is_authenticated=False,
            error=error,
            access_token=None,
        )

    def refresh(self) -> ActionResult:
        """Re-resolve the auth user and reload the profile."""
        self._start()
        try:
            user = self.auth.get_session_user(self.state.access_token)
            if user is None:
                self._reset(error=NOT_AUTHENTICATED)
                return ActionResult(success=False, error=NOT_AUTHENTICATED)
            profile = self.profiles.load_profile(user)
        except Exception as e:
            logger.error(f"Unexpected error while refreshing session: {e}")
            self._reset(error="Failed to authenticate user")
            return ActionResult(success=False, error="Failed to authenticate user")

        self.state.user = profile
        self.state.is_authenticated = True
        self.state.is_loading = False
        return ActionResult(success=True)

    def sign_in(self, email: str, password: str) -> ActionResult:
        self._start()
        try:
            response = self.auth.sign_in(email, password)
        except Exception as e:
            if classify_error(e) == ErrorKind.AUTH:
                return self._fail(error_message(e))
            logger.error(f"Sign in error: {e}")
            return self._fail(UNEXPECTED_ERROR)

        if not response.user or not response.session:
            return self._fail("Invalid email or password")
        self.state.access_token = response.session.access_token
        authorize(self.supabase, self.state.access_token)
        self.refresh()
        return ActionResult(success=True)

    def sign_up(
        self,
        email: str,
        password: str,
        name: str,
        phone: str,
        client_type: str = "individual",
        company_name: str = ""
    ) -> ActionResult:
        """Create the auth user, then its client row."""
        self._start()
        try:
            response = self.auth.sign_up(email, password, name, phone)
        except Exception as e:
            if classify_error(e) == ErrorKind.AUTH:
                return self._fail(error_message(e))
            logger.error(f"Sign up error: {e}")
            return self._fail(UNEXPECTED_ERROR)

        if response.user:
            try:
                self.supabase.table(CLIENT_TABLE).insert({
                    "id": response.user.id,
                    "name": company_name if client_type == "company" else name,
                    "contact_person_name": name,
                    "contact_person_email": email,
                    "contact_person_phone": phone,
                    "contact_person_address": "",
                    "entity_type": client_type,
                    "status": "active"
                }).execute()
            except Exception as e:
                logger.error(f"Error creating client record on sign up: {error_message(e)}")
                return self._fail(error_message(e))

        if response.session:
            self.state.access_token = response.session.access_token
            authorize(self.supabase, self.state.access_token)
        # Without a session (email confirmation pending) this leaves the store unauthenticated
        self.refresh()
        return ActionResult(success=True)

    def sign_out(self) -> ActionResult:
        self.state.is_loading = True
        self.auth.sign_out(self.state.access_token)
        self._reset()
        return ActionResult(success=True)

    def update_profile(self, profile: ProfileUpdate) -> ActionResult:
        self.state.is_loading = True
        try:
            user = self.auth.get_session_user(self.state.access_token)
            if user is None:
                return self._fail(NOT_AUTHENTICATED)
            result = self.profiles.update_profile(user["id"], profile)
        except Exception as e:
            logger.error(f"Error updating profile: {e}")
            return self._fail(UPDATE_FAILED)

        if not result.success:
            return self._fail(result.error or UPDATE_FAILED)
        self.refresh()
        return result
