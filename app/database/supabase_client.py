"""
Handles to the hosted Supabase project: auth plus row-level table queries.

supabase-py keeps the signed-in session on the client object and rewrites the
PostgREST Authorization header when it changes, so a client that serves one
caller must never serve another. Request handlers get a fresh client scoped
to the caller's access token; only operator scripts share a cached one.
"""

from supabase import create_client, Client
from app.config.settings import settings
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class SupabaseConfigError(RuntimeError):
    pass


def _require_config(key: Optional[str], key_name: str):
    if not settings.supabase_url or not key:
        raise SupabaseConfigError(f"Missing Supabase configuration: set SUPABASE_URL and {key_name}")


def authorize(client: Client, access_token: Optional[str]) -> Client:
    """Run the client's table queries as the user behind `access_token` (anon role when None)."""
    if access_token:
        client.postgrest.auth(access_token)
    return client


class SupabaseClient:
    _service_client: Optional[Client] = None

    @classmethod
    def create_client(cls, access_token: Optional[str] = None) -> Client:
        """New anon-key client for a single request; row-level security applies to every query."""
        _require_config(settings.supabase_key, "SUPABASE_KEY")
        return authorize(create_client(settings.supabase_url, settings.supabase_key), access_token)

    @classmethod
    def get_service_client(cls) -> Client:
        """Cached service-role client for operator scripts. Falls back to an anon client when no key is set."""
        if cls._service_client is None:
            if not settings.supabase_service_role_key:
                logger.warning("SUPABASE_SERVICE_ROLE_KEY not set, using an anon client")
                return cls.create_client()
            _require_config(settings.supabase_service_role_key, "SUPABASE_SERVICE_ROLE_KEY")
            cls._service_client = create_client(settings.supabase_url, settings.supabase_service_role_key)
            logger.info(f"Supabase service client created for {settings.supabase_url}")
        return cls._service_client
