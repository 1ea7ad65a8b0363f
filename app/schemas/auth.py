# app/schemas/auth.py
from typing import Optional
from app.schemas.base import CamelModel
from app.schemas.user import UserOut


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(CamelModel):
    user: UserOut
    access_token: str
    token_type: str = "bearer"


class SessionOut(CamelModel):
    user: UserOut
    state: str
    landing_page: str
