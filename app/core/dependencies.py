"""
Core dependencies for session resolution and route protection
"""

from fastapi import Depends, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.config.settings import settings
from app.database.supabase_client import SupabaseClient
from app.modules.auth.service import AuthService
from app.modules.session.store import SessionStore
from supabase import Client
from typing import Dict, Optional

# Optional so anonymous callers can still ask for their (empty) session
security = HTTPBearer(auto_error=False)


def get_access_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> Optional[str]:
    """Bearer token from the Authorization header, falling back to the session cookie."""
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.session_cookie_name)


def get_supabase(token: Optional[str] = Depends(get_access_token)) -> Client:
    """Per-request client; table queries run under the caller's row-level identity."""
    return SupabaseClient.create_client(token)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_session_store(
    token: Optional[str] = Depends(get_access_token),
    supabase: Client = Depends(get_supabase)
) -> SessionStore:
    return SessionStore(supabase, access_token=token)


def get_current_user(
    token: Optional[str] = Depends(get_access_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> Dict:
    """Authenticated user from the access token; 401 otherwise"""
    return auth_service.get_current_user(token)
