# app/routers/registrations.py
"""
Vehicle registration endpoints.
Citizens submit and read their own registrations; admins read everything and review.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session as DBSession
from app.database import get_db
from app.dependencies import require_role
from app.models.enums import RegistrationStatus, UserRole
from app.schemas.registration import (
    RegistrationCreate, RegistrationOut, RegistrationStats, StatusUpdate,
)
from app.services import registration_service
from app.services.session_store import Session, check_ownership

router = APIRouter()


def _dump(payload) -> Optional[dict]:
    return payload.model_dump() if payload is not None else None


@router.post("/registrations", response_model=RegistrationOut, status_code=201,
             summary="Submit a registration (vehicle + owner)")
def submit_registration(body: RegistrationCreate,
                        session: Session = Depends(require_role()),
                        db: DBSession = Depends(get_db)):
    """One request creates the owner, the vehicle and a PENDING registration."""
    user_id = body.user_id or session.user.id
    check_ownership(session, user_id).raise_if_denied()
    return registration_service.submit_registration(db, user_id, _dump(body.vehicle), _dump(body.owner))


@router.get("/registrations", response_model=list[RegistrationOut], summary="List registrations")
def list_registrations(user_only: bool = Query(False, alias="userOnly"),
                       status: Optional[RegistrationStatus] = None,
                       session: Session = Depends(require_role()),
                       db: DBSession = Depends(get_db)):
    """Admins get every registration unless userOnly=true. Citizens always get only their own."""
    user_id = None
    if user_only or session.role != UserRole.ADMIN:
        user_id = session.user.id
    return registration_service.list_registrations(db, user_id=user_id, status=status)


@router.get("/registrations/stats", response_model=RegistrationStats, summary="Counts per status")
def get_registration_stats(_admin: Session = Depends(require_role(UserRole.ADMIN)),
                           db: DBSession = Depends(get_db)):
    return registration_service.registration_stats(db)


@router.get("/registrations/{registration_id}", response_model=RegistrationOut,
            summary="Get one registration with vehicle, owner and user")
def get_registration(registration_id: str,
                     session: Session = Depends(require_role()),
                     db: DBSession = Depends(get_db)):
    registration = registration_service.get_registration(db, registration_id)
    check_ownership(session, registration.user_id).raise_if_denied()
    return registration


@router.patch("/registrations/{registration_id}/status", response_model=RegistrationOut,
              summary="Approve or reject a pending registration")
def update_registration_status(registration_id: str, body: StatusUpdate,
                               _admin: Session = Depends(require_role(UserRole.ADMIN)),
                               db: DBSession = Depends(get_db)):
    return registration_service.update_status(db, registration_id, body.status, body.rejection_reason)
