# app/services/user_service.py
"""
User accounts: sign-up, lookup, profile updates and the admin seed.
Every read returns the ORM row; routers serialise it through UserOut,
which has no password field.
"""

from typing import Optional
from sqlalchemy.orm import Session
from app.database import commit_or_raise
from app.models.enums import UserRole
from app.models.user import User
from app.services.auth_service import hash_password
from app.services.exceptions import NotFound, ValidationFailed
from app.services.validation import validate_new_user, validate_password
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _normalise_email(email: str) -> str:
    return email.strip().lower()


def get_user(db: Session, user_id: str) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFound("User not found")
    return user


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Find a user by email. Returns None if not found."""
    if not email:
        return None
    return db.query(User).filter(User.email == _normalise_email(email)).first()


def list_users(db: Session):
    return db.query(User).order_by(User.created_at.desc()).all()


def create_user(db: Session, email: str, password: str, full_name: str,
                phone_number: str = None, role: UserRole = UserRole.CITIZEN) -> User:
    result = validate_new_user(email, password, full_name)
    if not result.ok:
        logger.warning(f"User sign-up rejected: {result.field}: {result.message}")
        result.raise_for_error()

    if get_user_by_email(db, email):
        raise ValidationFailed("email", "Email already registered")

    user = User(
        email=_normalise_email(email),
        password_hash=hash_password(password),
        full_name=full_name,
        phone_number=phone_number or None,
        role=role,
    )
    db.add(user)
    commit_or_raise(db, "create user")
    db.refresh(user)
    logger.info(f"User created: {user.email} role={user.role.value}")
    return user


def update_user(db: Session, user_id: str, full_name: str = None,
                phone_number: str = None, password: str = None) -> User:
    """Profile update. Email and role are not editable through this path."""
    user = get_user(db, user_id)

    if full_name is not None:
        if not full_name.strip():
            raise ValidationFailed("fullName", "fullName cannot be empty")
        user.full_name = full_name
    if phone_number is not None:
        user.phone_number = phone_number or None
    if password is not None:
        validate_password(password).raise_for_error()
        user.password_hash = hash_password(password)

    commit_or_raise(db, "update user")
    db.refresh(user)
    logger.info(f"User updated: {user.email}")
    return user


def ensure_admin(db: Session, email: str, password: str, full_name: str) -> User:
    """Create the admin account, or promote an existing user with that email. Idempotent."""
    user = get_user_by_email(db, email)
    if user:
        if user.role != UserRole.ADMIN:
            user.role = UserRole.ADMIN
            commit_or_raise(db, "promote admin")
            logger.info(f"Promoted {user.email} to ADMIN")
        return user
    return create_user(db, email, password, full_name, role=UserRole.ADMIN)
