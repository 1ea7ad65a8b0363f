# app/services/auth_service.py
"""
Password hashing and access-token handling.
Tokens are HS256 JWTs carrying sub (user id), role, jti and type=access.
Whether a token is still live is decided by SessionStore, not here.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.config import settings
from app.models.user import User
from app.utils.logger import get_logger

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_access_token(user: User) -> Tuple[str, str, int]:
    """Returns (token, jti, exp) with exp as epoch seconds."""
    now = datetime.now(timezone.utc)
    jti = uuid.uuid4().hex
    payload = {
        "sub": str(user.id),
        "role": getattr(user.role, "value", user.role),
        "jti": jti,
        "type": "access",
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)).timestamp()),
    }
    token = jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    return token, jti, payload["exp"]


def decode_access_token(token: str, verify_exp: bool = True) -> Optional[dict]:
    """
    Returns the claims of a valid access token, or None.
    verify_exp=False still checks the signature; the store uses it to find
    the jti of an expired token.
    """
    try:
        claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM],
                            options={"verify_exp": verify_exp})
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        return None
    if claims.get("type") != "access" or not claims.get("sub") or not claims.get("jti"):
        return None
    return claims


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    """Returns the user when email and password match, else None."""
    if not email or not password:
        return None
    user = db.query(User).filter(User.email == email.strip().lower()).first()
    if not user or not verify_password(password, user.password_hash):
        return None
    return user
