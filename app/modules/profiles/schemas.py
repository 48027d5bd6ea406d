from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class UserProfile(BaseModel):
    id: str
    email: str = ""
    name: Optional[str] = ""
    phone: Optional[str] = ""
    address: Optional[str] = ""
    avatar_url: Optional[str] = ""
    client_type: Optional[str] = ""  # individual | company
    company_name: Optional[str] = ""
    profile_completed: bool = False
    completion_percentage: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    avatar_url: Optional[str] = None
    client_type: Optional[str] = None
    company_name: Optional[str] = None


class ProfileCompletionRequest(BaseModel):
    name: str = ""
    phone: str = ""
    address: str = ""
    client_type: str = "individual"
    company_name: str = ""


class ProfileResponse(UserProfile):
    initials: str = "?"


class ProfileCompletionResponse(BaseModel):
    profile: ProfileResponse
    redirect: str
