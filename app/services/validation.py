# app/services/validation.py
"""
Explicit payload validation.
Each validate_* function inspects a plain dict (or scalar arguments) and returns
a ValidationResult. Services call raise_for_error() before touching the database,
so a failed check never leaves a partial row behind.
"""

from dataclasses import dataclass
from typing import Optional

from email_validator import validate_email, EmailNotValidError
from pydantic.alias_generators import to_camel

from app.config import settings
from app.models.enums import RegistrationStatus
from app.services.exceptions import ValidationFailed

VEHICLE_TEXT_FIELDS = ("plate_number", "make", "model", "color",
                       "chassis_number", "engine_number", "vehicle_type")
VEHICLE_FIELDS = VEHICLE_TEXT_FIELDS + ("year",)
OWNER_REQUIRED_FIELDS = ("full_name", "national_id", "phone_number", "address")
OWNER_FIELDS = OWNER_REQUIRED_FIELDS + ("email",)
REVIEW_STATUSES = {RegistrationStatus.APPROVED.value, RegistrationStatus.REJECTED.value}
MIN_PASSWORD_LENGTH = 6


@dataclass
class ValidationResult:
    ok: bool
    field: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def error(cls, field: str, message: str) -> "ValidationResult":
        return cls(ok=False, field=field, message=message)

    def raise_for_error(self):
        if not self.ok:
            raise ValidationFailed(self.field, self.message)


def _field_path(prefix: Optional[str], name: str) -> str:
    camel = to_camel(name)
    return f"{prefix}.{camel}" if prefix else camel


def _is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


def _check_email(value: str, field: str) -> ValidationResult:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        return ValidationResult.error(field, f"{field} must be a valid email address: {e}")
    return ValidationResult.success()


def validate_vehicle(vehicle: Optional[dict], min_year: int = None) -> ValidationResult:
    if min_year is None:
        min_year = settings.MIN_VEHICLE_YEAR
    if not vehicle:
        return ValidationResult.error("vehicle", "vehicle is required")

    for name in VEHICLE_TEXT_FIELDS:
        if _is_blank(vehicle.get(name)):
            path = _field_path("vehicle", name)
            return ValidationResult.error(path, f"{path} is required")

    year = vehicle.get("year")
    if year is None:
        return ValidationResult.error("vehicle.year", "vehicle.year is required")
    if isinstance(year, bool) or not isinstance(year, int):
        return ValidationResult.error("vehicle.year", "vehicle.year must be an integer")
    if year < min_year:
        return ValidationResult.error("vehicle.year", f"vehicle.year must be {min_year} or later")
    return ValidationResult.success()


def validate_owner(owner: Optional[dict]) -> ValidationResult:
    if not owner:
        return ValidationResult.error("owner", "owner is required")

    for name in OWNER_REQUIRED_FIELDS:
        if _is_blank(owner.get(name)):
            path = _field_path("owner", name)
            return ValidationResult.error(path, f"{path} is required")

    email = owner.get("email")
    if email is not None and not _is_blank(email):
        return _check_email(email, "owner.email")
    return ValidationResult.success()


def validate_registration(user_id: Optional[str], vehicle: Optional[dict],
                          owner: Optional[dict]) -> ValidationResult:
    if user_id is None or (isinstance(user_id, str) and not user_id.strip()):
        return ValidationResult.error("userId", "userId is required")
    if not isinstance(user_id, str):
        return ValidationResult.error("userId", "userId must be a string")
    result = validate_vehicle(vehicle)
    if not result.ok:
        return result
    return validate_owner(owner)


def validate_status_update(status, rejection_reason: Optional[str]) -> ValidationResult:
    value = getattr(status, "value", status)
    if value not in REVIEW_STATUSES:
        return ValidationResult.error("status", "status must be APPROVED or REJECTED")
    if value == RegistrationStatus.REJECTED.value and _is_blank(rejection_reason):
        return ValidationResult.error("rejectionReason",
                                      "rejectionReason is required when rejecting a registration")
    return ValidationResult.success()


def validate_new_user(email: Optional[str], password: Optional[str],
                      full_name: Optional[str]) -> ValidationResult:
    if _is_blank(email):
        return ValidationResult.error("email", "email is required")
    result = _check_email(email, "email")
    if not result.ok:
        return result
    result = validate_password(password)
    if not result.ok:
        return result
    if _is_blank(full_name):
        return ValidationResult.error("fullName", "fullName is required")
    return ValidationResult.success()


def validate_password(password: Optional[str]) -> ValidationResult:
    if not isinstance(password, str) or not password:
        return ValidationResult.error("password", "password is required")
    if len(password) < MIN_PASSWORD_LENGTH:
        return ValidationResult.error("password",
                                      f"password must be at least {MIN_PASSWORD_LENGTH} characters")
    return ValidationResult.success()
