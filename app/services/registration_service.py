# app/services/registration_service.py
"""
Vehicle registration workflow.

Submission creates Vehicle + Owner + VehicleRegistration in one commit with
status PENDING. Review moves a PENDING registration to APPROVED or REJECTED;
both are terminal.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.database import commit_or_raise
from app.models.enums import RegistrationStatus
from app.models.owner import Owner
from app.models.registration import VehicleRegistration
from app.models.user import User
from app.models.vehicle import Vehicle
from app.services.exceptions import InvalidTransition, NotFound
from app.services.validation import (
    OWNER_FIELDS, VEHICLE_FIELDS, validate_registration, validate_status_update,
)
from app.utils.logger import get_logger

logger = get_logger(__name__)


def make_registration_number(registration: VehicleRegistration, reviewed_at: datetime) -> str:
    """VR-<year>-<all 32 hex chars of the id>, unique because the id is."""
    return f"VR-{reviewed_at.year}-{registration.id.replace('-', '').upper()}"


def submit_registration(db: Session, user_id: str, vehicle: Optional[dict],
                        owner: Optional[dict]) -> VehicleRegistration:
    result = validate_registration(user_id, vehicle, owner)
    if not result.ok:
        logger.warning(f"Registration rejected by validation: {result.field}: {result.message}")
        result.raise_for_error()

    if not db.query(User).filter(User.id == user_id).first():
        raise NotFound("User not found")

    owner_values = {k: owner.get(k) for k in OWNER_FIELDS}
    owner_values["email"] = (owner_values["email"] or "").strip() or None

    registration = VehicleRegistration(
        status=RegistrationStatus.PENDING,
        submitted_at=datetime.utcnow(),
        user_id=user_id,
        vehicle=Vehicle(**{k: vehicle[k] for k in VEHICLE_FIELDS}),
        owner=Owner(**owner_values),
    )
    # Vehicle and Owner are flushed through the relationships in the same commit
    db.add(registration)
    commit_or_raise(db, "submit registration")
    db.refresh(registration)

    logger.info(f"Registration {registration.id} submitted by user {user_id} "
                f"for plate {registration.vehicle.plate_number}")
    return registration


def list_registrations(db: Session, user_id: str = None,
                       status: RegistrationStatus = None):
    """All registrations, newest first. user_id and status narrow the result."""
    q = db.query(VehicleRegistration)
    if user_id:
        q = q.filter(VehicleRegistration.user_id == user_id)
    if status:
        q = q.filter(VehicleRegistration.status == status)
    return q.order_by(VehicleRegistration.submitted_at.desc()).all()


def get_registration(db: Session, registration_id: str) -> VehicleRegistration:
    registration = (
        db.query(VehicleRegistration)
        .filter(VehicleRegistration.id == registration_id)
        .first()
    )
    if not registration:
        raise NotFound("Registration not found")
    return registration


def update_status(db: Session, registration_id: str, status,
                  rejection_reason: str = None) -> VehicleRegistration:
    """
    Review a PENDING registration.

    APPROVED clears any rejection reason and assigns the registration number.
    REJECTED stores the trimmed reason. Both stamp reviewed_at.
    Nothing is written when validation fails or the registration was already reviewed.
    """
    result = validate_status_update(status, rejection_reason)
    if not result.ok:
        logger.warning(f"Status update on {registration_id} rejected: {result.message}")
        result.raise_for_error()

    new_status = RegistrationStatus(getattr(status, "value", status))
    registration = get_registration(db, registration_id)

    if registration.status != RegistrationStatus.PENDING:
        raise InvalidTransition(
            f"Registration is already {registration.status.value}; "
            f"only PENDING registrations can be reviewed"
        )

    # reviewed_at must never precede submitted_at
    now = max(datetime.utcnow(), registration.submitted_at)
    registration.status = new_status
    registration.reviewed_at = now
    if new_status == RegistrationStatus.APPROVED:
        registration.rejection_reason = None
        registration.registration_number = make_registration_number(registration, now)
    else:
        registration.rejection_reason = rejection_reason.strip()

    commit_or_raise(db, "update registration status")
    db.refresh(registration)
    logger.info(f"Registration {registration.id}: PENDING → {new_status.value}")
    return registration


def registration_stats(db: Session) -> dict:
    """Per-status counts for the admin dashboard."""
    rows = (
        db.query(VehicleRegistration.status, func.count(VehicleRegistration.id))
        .group_by(VehicleRegistration.status)
        .all()
    )
    counts = {status: count for status, count in rows}
    stats = {s.value.lower(): counts.get(s, 0) for s in RegistrationStatus}
    stats["total"] = sum(counts.values())
    return stats
