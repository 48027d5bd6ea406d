from fastapi import APIRouter, Depends
from app.modules.navigation.schemas import NavigationDecision
from app.modules.session.store import SessionStore
from app.core.dependencies import get_session_store
from app.core.navigation import resolve_redirect
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/navigation", tags=["navigation"])


@router.get("/resolve", response_model=NavigationDecision)
def resolve_navigation(
    path: str,
    store: SessionStore = Depends(get_session_store)
):
    """Where the browser should go for `path` given the caller's session (null redirect = stay)"""
    store.refresh()
    state = store.state
    redirect = resolve_redirect(path, state)
    if redirect:
        logger.info(f"Redirecting {path} -> {redirect}")
    return NavigationDecision(
        path=path,
        redirect=redirect,
        is_authenticated=state.is_authenticated,
        profile_completed=state.user.profile_completed if state.user else None
    )
