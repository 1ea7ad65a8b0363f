# app/services/session_store.py
"""
Server-side sessions and role gating.

A SessionStore is created at application startup (app.state.sessions) and
cleared at shutdown. It records which issued tokens are still live, so logout
takes effect immediately and a restart logs everyone out. Entries for
expired tokens are pruned on every login and dropped as soon as an expired
token is presented to restore() or logout().

Every request resolves its bearer token into a Session via restore().
check_access() and check_ownership() return an AccessDecision; a denied
decision becomes a 401/403 response carrying the caller's landing page.
"""

import enum
import time
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from app.models.enums import UserRole
from app.models.user import User
from app.services.auth_service import authenticate, create_access_token, decode_access_token
from app.services.exceptions import AccessDenied
from app.utils.logger import get_logger

logger = get_logger(__name__)

LOGIN_PAGE = "/login"
LANDING_PAGES = {
    UserRole.ADMIN: "/admin/dashboard",
    UserRole.CITIZEN: "/dashboard",
}


class SessionState(str, enum.Enum):
    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    CITIZEN = "citizen"
    ADMIN = "admin"


def landing_page_for(role: Optional[UserRole]) -> str:
    return LANDING_PAGES.get(role, LOGIN_PAGE)


@dataclass
class Session:
    user: Optional[User] = None
    token: Optional[str] = None
    state: SessionState = SessionState.LOADING

    @classmethod
    def unauthenticated(cls) -> "Session":
        return cls(state=SessionState.UNAUTHENTICATED)

    @classmethod
    def for_user(cls, user: User, token: str) -> "Session":
        state = SessionState.ADMIN if user.role == UserRole.ADMIN else SessionState.CITIZEN
        return cls(user=user, token=token, state=state)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and self.token is not None

    @property
    def role(self) -> Optional[UserRole]:
        return self.user.role if self.user else None

    @property
    def landing_page(self) -> str:
        return landing_page_for(self.role)


@dataclass
class AccessDecision:
    allowed: bool
    status_code: int = 200
    detail: Optional[str] = None
    redirect_to: Optional[str] = None

    def raise_if_denied(self):
        if not self.allowed:
            raise AccessDenied(self.detail, status_code=self.status_code,
                               redirect_to=self.redirect_to)


def check_access(session: Session, required_role: UserRole = None) -> AccessDecision:
    """Deny when not logged in (401) or when the role does not match (403)."""
    if not session.is_authenticated:
        return AccessDecision(False, 401, "Not authenticated", LOGIN_PAGE)
    if required_role and session.role != required_role:
        return AccessDecision(False, 403, f"{required_role.value} role required",
                              session.landing_page)
    return AccessDecision(True)


def check_ownership(session: Session, owner_user_id: str) -> AccessDecision:
    """Admins reach every record; citizens only records tied to their own user id."""
    decision = check_access(session)
    if not decision.allowed:
        return decision
    if session.role == UserRole.ADMIN or session.user.id == owner_user_id:
        return AccessDecision(True)
    return AccessDecision(False, 403, "You can only access your own records",
                          session.landing_page)


class SessionStore:
    def __init__(self):
        self._live = {}   # jti -> (user id, exp epoch seconds)

    def __len__(self):
        return len(self._live)

    def prune(self, now: float = None) -> int:
        """Drop entries whose token has expired. Returns how many were removed."""
        now = time.time() if now is None else now
        expired = [jti for jti, (_, exp) in self._live.items() if exp <= now]
        for jti in expired:
            del self._live[jti]
        return len(expired)

    def _forget(self, token: str):
        claims = decode_access_token(token, verify_exp=False)
        if claims:
            self._live.pop(claims["jti"], None)

    def login(self, db: DBSession, email: str, password: str) -> Session:
        user = authenticate(db, email, password)
        if not user:
            logger.warning(f"Failed login for {email!r}")
            raise AccessDenied("Invalid email or password", status_code=401,
                               redirect_to=LOGIN_PAGE)
        self.prune()
        token, jti, exp = create_access_token(user)
        self._live[jti] = (user.id, exp)
        logger.info(f"Login: {user.email} ({user.role.value})")
        return Session.for_user(user, token)

    def logout(self, token: Optional[str]) -> Session:
        # Expired tokens are still signed by us, so their entry can be dropped
        claims = decode_access_token(token, verify_exp=False) if token else None
        if claims and self._live.pop(claims["jti"], None):
            logger.info(f"Logout: user {claims['sub']}")
        return Session.unauthenticated()

    def restore(self, db: DBSession, token: Optional[str]) -> Session:
        """Rebuild the session for a bearer token. Anything invalid yields an unauthenticated session."""
        if not token:
            return Session.unauthenticated()
        claims = decode_access_token(token)
        if not claims:
            self._forget(token)
            return Session.unauthenticated()
        entry = self._live.get(claims["jti"])
        if not entry or entry[0] != claims["sub"]:
            return Session.unauthenticated()
        user = db.query(User).filter(User.id == claims["sub"]).first()
        if not user:
            self._live.pop(claims["jti"], None)
            return Session.unauthenticated()
        return Session.for_user(user, token)

    def clear(self):
        self._live.clear()
