# app/schemas/vehicle.py
from typing import Optional
from app.schemas.base import CamelModel


class VehicleIn(CamelModel):
    # Presence and the year floor are checked by app.services.validation
    plate_number: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    color: Optional[str] = None
    chassis_number: Optional[str] = None
    engine_number: Optional[str] = None
    vehicle_type: Optional[str] = None   # Sedan | SUV | Truck | Van | Motorcycle | Bus | Other


class VehicleOut(CamelModel):
    id: str
    plate_number: str
    make: str
    model: str
    year: int
    color: str
    chassis_number: str
    engine_number: str
    vehicle_type: str
