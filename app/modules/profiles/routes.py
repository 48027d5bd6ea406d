from fastapi import APIRouter, Depends, HTTPException
from app.core.formatting import get_initials
from app.modules.profiles.schemas import (
    UserProfile, ProfileUpdate, ProfileCompletionRequest,
    ProfileResponse, ProfileCompletionResponse
)
from app.modules.profiles.service import validate_completion_form
from app.modules.session.store import SessionStore, NOT_AUTHENTICATED
from app.core.dependencies import get_session_store
from app.core.navigation import DASHBOARD_PATH

router = APIRouter(prefix="/profile", tags=["profile"])


def _to_response(profile: UserProfile) -> ProfileResponse:
    return ProfileResponse(**profile.model_dump(), initials=get_initials(profile.name))


def _require_profile(store: SessionStore) -> UserProfile:
    store.refresh()
    if not store.state.is_authenticated or store.state.user is None:
        raise HTTPException(status_code=401, detail=store.state.error or NOT_AUTHENTICATED)
    return store.state.user


@router.get("", response_model=ProfileResponse)
def get_profile(store: SessionStore = Depends(get_session_store)):
    """Current client's profile with completion data"""
    return _to_response(_require_profile(store))


@router.put("", response_model=ProfileResponse)
def update_profile(
    profile_data: ProfileUpdate,
    store: SessionStore = Depends(get_session_store)
):
    """Update contact details"""
    result = store.update_profile(profile_data)
    if not result.success:
        status_code = 401 if result.error == NOT_AUTHENTICATED else 400
        raise HTTPException(status_code=status_code, detail=result.error)
    if store.state.user is None:
        raise HTTPException(status_code=401, detail=store.state.error or NOT_AUTHENTICATED)
    return _to_response(store.state.user)


@router.post("/complete", response_model=ProfileCompletionResponse)
def complete_profile(
    form: ProfileCompletionRequest,
    store: SessionStore = Depends(get_session_store)
):
    """Submit the completion wizard; required fields are checked before anything is saved"""
    validation_error = validate_completion_form(form)
    if validation_error:
        raise HTTPException(status_code=400, detail=validation_error)

    result = store.update_profile(ProfileUpdate(**form.model_dump()))
    if not result.success:
        status_code = 401 if result.error == NOT_AUTHENTICATED else 400
        raise HTTPException(status_code=status_code, detail=result.error or "Failed to update profile")
    if store.state.user is None:
        raise HTTPException(status_code=401, detail=store.state.error or NOT_AUTHENTICATED)
    return ProfileCompletionResponse(profile=_to_response(store.state.user), redirect=DASHBOARD_PATH)
