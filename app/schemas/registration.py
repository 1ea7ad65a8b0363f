# app/schemas/registration.py
from datetime import datetime
from typing import Optional
from app.models.enums import RegistrationStatus
from app.schemas.base import CamelModel
from app.schemas.owner import OwnerIn, OwnerOut
from app.schemas.user import UserOut
from app.schemas.vehicle import VehicleIn, VehicleOut


class RegistrationCreate(CamelModel):
    user_id: Optional[str] = None    # Defaults to the caller when omitted
    vehicle: Optional[VehicleIn] = None
    owner: Optional[OwnerIn] = None


class StatusUpdate(CamelModel):
    status: Optional[str] = None             # APPROVED | REJECTED
    rejection_reason: Optional[str] = None   # Required when REJECTED


class RegistrationOut(CamelModel):
    id: str
    registration_number: Optional[str] = None
    status: RegistrationStatus
    submitted_at: datetime
    reviewed_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    user_id: str
    vehicle_id: str
    owner_id: str
    user: Optional[UserOut] = None
    vehicle: Optional[VehicleOut] = None
    owner: Optional[OwnerOut] = None


class RegistrationStats(CamelModel):
    total: int
    pending: int
    approved: int
    rejected: int
