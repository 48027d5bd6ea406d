from pydantic import BaseModel
from typing import Optional


class NavigationDecision(BaseModel):
    path: str
    redirect: Optional[str] = None
    is_authenticated: bool
    profile_completed: Optional[bool] = None
