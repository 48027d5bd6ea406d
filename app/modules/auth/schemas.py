from pydantic import BaseModel, EmailStr
from typing import Optional
from app.modules.session.schemas import SessionState


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class SignUpRequest(BaseModel):
    email: EmailStr
    password: str
    name: str
    phone: str = ""
    client_type: str = "individual"  # individual | company
    company_name: str = ""


class SessionResponse(SessionState):
    redirect: Optional[str] = None


class LogoutResponse(BaseModel):
    message: str
    redirect: str
