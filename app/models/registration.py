# app/models/registration.py
"""
Vehicle registrations table: the aggregate root.
Ties one vehicle, one owner and the submitting user to a review status.
Status moves PENDING → APPROVED or PENDING → REJECTED, never back.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, Enum, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.enums import RegistrationStatus


class VehicleRegistration(Base):
    __tablename__ = "vehicle_registrations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    registration_number = Column(String(50), unique=True)   # Assigned on approval
    status = Column(Enum(RegistrationStatus, name="registration_status", native_enum=False),
                    nullable=False, default=RegistrationStatus.PENDING, index=True)
    submitted_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    reviewed_at = Column(DateTime)
    rejection_reason = Column(Text)

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    vehicle_id = Column(String(36), ForeignKey("vehicles.id"), nullable=False, unique=True)
    owner_id = Column(String(36), ForeignKey("owners.id"), nullable=False, unique=True)

    user = relationship("User", lazy="joined")
    vehicle = relationship("Vehicle", lazy="joined")
    owner = relationship("Owner", lazy="joined")

    def __repr__(self):
        return f"<VehicleRegistration {self.id} status={self.status}>"
