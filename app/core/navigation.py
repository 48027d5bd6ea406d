"""
Route gating for the portal's browser paths.

`resolve_redirect` decides, from the session state and the current path, where
the browser should be sent (first matching rule wins):

1. unauthenticated on a protected route -> login, remembering the path
2. authenticated on an auth route -> dashboard
3. authenticated on the home page -> dashboard
4. authenticated with an incomplete profile, outside the completion and auth
   routes -> completion wizard

Nothing is decided while the session is still loading. Evaluating the same
state twice gives the same answer, and once the browser follows a redirect
the new path no longer matches the rule that issued it.

`SessionGateMiddleware` is the coarse edge check that runs before any page is
served: it only looks at whether a session cookie is present.
"""

from typing import Optional
from urllib.parse import quote
from starlette.requests import Request
from starlette.responses import RedirectResponse
from app.config.settings import settings
from app.modules.session.schemas import SessionState
import logging

logger = logging.getLogger(__name__)

PROTECTED_PREFIXES = ("/clients", "/profile")
AUTH_PREFIX = "/auth"
HOME_PATH = "/"
LOGIN_PATH = "/auth/login"
DASHBOARD_PATH = "/clients/dashboard"
COMPLETION_PATH = "/profile/complete"
# Characters encodeURIComponent leaves unescaped
URI_COMPONENT_SAFE = "-_.!~*'()"


def is_protected_route(path: str) -> bool:
    return any(path.startswith(prefix) for prefix in PROTECTED_PREFIXES)


def is_auth_route(path: str) -> bool:
    return path.startswith(AUTH_PREFIX)


def is_completion_route(path: str) -> bool:
    return path.startswith(COMPLETION_PATH)


def login_redirect(path: str) -> str:
    return f"{LOGIN_PATH}?redirectedFrom={quote(path, safe=URI_COMPONENT_SAFE)}"


def resolve_redirect(path: str, state: SessionState) -> Optional[str]:
    if state.is_loading:
        return None

    if not state.is_authenticated:
        if is_protected_route(path):
            return login_redirect(path)
        return None

    if is_auth_route(path):
        return DASHBOARD_PATH

    if path == HOME_PATH:
        return DASHBOARD_PATH

    if (
        state.user is not None
        and state.user.profile_completed is False
        and not is_completion_route(path)
        and not is_auth_route(path)
    ):
        return COMPLETION_PATH

    return None


class SessionGateMiddleware:
    """Redirect on session-cookie presence for the dashboard and login pages."""

    def __init__(self, app, cookie_name: Optional[str] = None):
        self.app = app
        self.cookie_name = cookie_name or settings.session_cookie_name

    def _redirect_for(self, request: Request) -> Optional[str]:
        path = request.url.path
        has_session = bool(request.cookies.get(self.cookie_name))
        if not has_session and path.startswith(DASHBOARD_PATH):
            return LOGIN_PATH
        if has_session and path == LOGIN_PATH:
            return DASHBOARD_PATH
        return None

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        try:
            target = self._redirect_for(Request(scope))
        except Exception as e:
            logger.error(f"Session gate error: {e}")
            target = None

        if target is None:
            await self.app(scope, receive, send)
            return

        logger.info(f"Session gate redirecting {scope.get('path')} -> {target}")
        response = RedirectResponse(url=target, status_code=307)
        await response(scope, receive, send)
