# app/models/owner.py
"""
Owners table: the legal owner named on a registration.
May differ from the user who submitted it.
"""

import uuid
from sqlalchemy import Column, String, Text
from app.database import Base


class Owner(Base):
    __tablename__ = "owners"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    full_name = Column(String(200), nullable=False)
    national_id = Column(String(100), nullable=False, index=True)
    phone_number = Column(String(50), nullable=False)
    email = Column(String(255))
    address = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Owner {self.full_name} nid={self.national_id}>"
