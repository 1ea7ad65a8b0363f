# app/models/vehicle.py
"""
Vehicles table.
One row is created per registration submission and belongs to that registration only.
"""

import uuid
from sqlalchemy import Column, Integer, String, CheckConstraint
from app.config import settings
from app.database import Base


class Vehicle(Base):
    __tablename__ = "vehicles"
    __table_args__ = (CheckConstraint(f"year >= {settings.MIN_VEHICLE_YEAR}", name="ck_vehicles_year_min"),)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    plate_number = Column(String(50), nullable=False, index=True)
    make = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    color = Column(String(50), nullable=False)
    chassis_number = Column(String(100), nullable=False)
    engine_number = Column(String(100), nullable=False)
    vehicle_type = Column(String(50), nullable=False)   # Sedan | SUV | Truck | ...

    def __repr__(self):
        return f"<Vehicle {self.plate_number} {self.make} {self.model} {self.year}>"
