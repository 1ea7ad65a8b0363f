# app/dependencies.py
"""FastAPI dependencies for resolving the caller's session and gating by role."""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session as DBSession
from app.database import get_db
from app.models.enums import UserRole
from app.services.session_store import Session, SessionStore, check_access

bearer_scheme = HTTPBearer(auto_error=False)


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    store: SessionStore = Depends(get_session_store),
    db: DBSession = Depends(get_db),
) -> Session:
    token = credentials.credentials if credentials else None
    return store.restore(db, token)


def require_role(required_role: UserRole = None):
    """Dependency factory. With no role, any authenticated session passes."""

    def dep(session: Session = Depends(get_session)) -> Session:
        check_access(session, required_role).raise_if_denied()
        return session

    return dep
