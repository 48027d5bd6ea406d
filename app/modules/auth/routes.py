from fastapi import APIRouter, Depends, HTTPException
from app.modules.auth.schemas import LoginRequest, SignUpRequest, SessionResponse, LogoutResponse
from app.modules.session.store import SessionStore
from app.core.dependencies import get_session_store
from app.core.navigation import DASHBOARD_PATH, LOGIN_PATH, resolve_redirect

router = APIRouter(prefix="/auth", tags=["auth"])


def _session_response(store: SessionStore, path: str) -> SessionResponse:
    return SessionResponse(
        **store.state.model_dump(),
        redirect=resolve_redirect(path, store.state)
    )


@router.post("/login", response_model=SessionResponse)
def login(
    login_data: LoginRequest,
    store: SessionStore = Depends(get_session_store)
):
    """Sign in and return the session, with the page to land on"""
    result = store.sign_in(login_data.email, login_data.password)
    if not result.success:
        raise HTTPException(status_code=401, detail=result.error)
    return _session_response(store, LOGIN_PATH)


@router.post("/signup", response_model=SessionResponse, status_code=201)
def signup(
    signup_data: SignUpRequest,
    store: SessionStore = Depends(get_session_store)
):
    """Register a new client account"""
    result = store.sign_up(
        signup_data.email,
        signup_data.password,
        signup_data.name,
        signup_data.phone,
        signup_data.client_type,
        signup_data.company_name
    )
    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)
    return _session_response(store, "/auth/signup")


@router.post("/logout", response_model=LogoutResponse)
def logout(store: SessionStore = Depends(get_session_store)):
    """Sign out; the client drops its token"""
    store.sign_out()
    return LogoutResponse(message="Logged out successfully", redirect=LOGIN_PATH)


@router.get("/session", response_model=SessionResponse)
def get_session(
    path: str = DASHBOARD_PATH,
    store: SessionStore = Depends(get_session_store)
):
    """Current session state; unauthenticated callers get an empty session, not an error"""
    store.refresh()
    return _session_response(store, path)


@router.post("/session/refresh", response_model=SessionResponse)
def refresh_session(store: SessionStore = Depends(get_session_store)):
    """Reload the profile behind the current token"""
    result = store.refresh()
    if not result.success:
        raise HTTPException(status_code=401, detail=result.error)
    return _session_response(store, DASHBOARD_PATH)
