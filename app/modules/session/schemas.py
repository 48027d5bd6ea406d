from pydantic import BaseModel
from typing import Optional
from app.modules.profiles.schemas import UserProfile


class ActionResult(BaseModel):
    success: bool
    error: Optional[str] = None


class SessionState(BaseModel):
    user: Optional[UserProfile] = None
    is_loading: bool = True
    is_authenticated: bool = False
    error: Optional[str] = None
    access_token: Optional[str] = None
