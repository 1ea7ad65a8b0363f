# app/schemas/user.py
from datetime import datetime
from typing import Optional
from app.models.enums import UserRole
from app.schemas.base import CamelModel


class UserCreate(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None
    phone_number: Optional[str] = None


class UserUpdate(CamelModel):
    full_name: Optional[str] = None
    phone_number: Optional[str] = None
    password: Optional[str] = None


class UserOut(CamelModel):
    """Public view of a user. Never carries the password or its hash."""
    id: str
    email: str
    full_name: str
    phone_number: Optional[str] = None
    role: UserRole
    created_at: Optional[datetime] = None
