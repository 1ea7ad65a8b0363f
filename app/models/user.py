# app/models/user.py
"""
Users table: citizens who submit registrations and admins who review them.
The password is stored only as a bcrypt hash and never leaves the service layer.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Enum
from app.database import Base
from app.models.enums import UserRole


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(200), nullable=False)
    phone_number = Column(String(50))
    role = Column(Enum(UserRole, name="user_role", native_enum=False),
                  nullable=False, default=UserRole.CITIZEN)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<User {self.email} role={self.role}>"
