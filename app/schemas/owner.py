# app/schemas/owner.py
from typing import Optional
from app.schemas.base import CamelModel


class OwnerIn(CamelModel):
    # Presence and format are checked by app.services.validation
    full_name: Optional[str] = None
    national_id: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class OwnerOut(CamelModel):
    id: str
    full_name: str
    national_id: str
    phone_number: str
    email: Optional[str] = None
    address: str
