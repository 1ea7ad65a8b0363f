# tests/test_validation.py
"""Unit tests for the explicit payload validators."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from app.models.enums import RegistrationStatus
from app.services.exceptions import ValidationFailed
from app.services.validation import (
    validate_new_user, validate_owner, validate_registration,
    validate_status_update, validate_vehicle,
)


class TestVehicleValidation:
    def test_valid_vehicle(self, vehicle):
        assert validate_vehicle(vehicle).ok

    def test_year_1899_rejected(self, vehicle):
        vehicle["year"] = 1899
        result = validate_vehicle(vehicle)
        assert not result.ok
        assert result.field == "vehicle.year"

    def test_year_1900_accepted(self, vehicle):
        vehicle["year"] = 1900
        assert validate_vehicle(vehicle).ok

    def test_year_must_be_integer(self, vehicle):
        vehicle["year"] = "2019"
        assert validate_vehicle(vehicle).field == "vehicle.year"

    @pytest.mark.parametrize("field,path", [
        ("plate_number", "vehicle.plateNumber"),
        ("chassis_number", "vehicle.chassisNumber"),
        ("vehicle_type", "vehicle.vehicleType"),
    ])
    def test_missing_field_reported_in_camel_case(self, vehicle, field, path):
        vehicle[field] = None
        result = validate_vehicle(vehicle)
        assert not result.ok
        assert result.field == path
        assert "required" in result.message

    def test_blank_string_is_missing(self, vehicle):
        vehicle["make"] = "   "
        assert validate_vehicle(vehicle).field == "vehicle.make"

    def test_absent_vehicle(self):
        assert validate_vehicle(None).field == "vehicle"


class TestOwnerValidation:
    def test_email_optional(self, owner):
        assert validate_owner(owner).ok
        owner["email"] = ""
        assert validate_owner(owner).ok

    def test_valid_email_accepted(self, owner):
        owner["email"] = "ahmed.ali@example.so"
        assert validate_owner(owner).ok

    def test_invalid_email_rejected(self, owner):
        owner["email"] = "not-an-email"
        result = validate_owner(owner)
        assert not result.ok
        assert result.field == "owner.email"

    def test_missing_national_id(self, owner):
        del owner["national_id"]
        assert validate_owner(owner).field == "owner.nationalId"


class TestRegistrationValidation:
    def test_user_id_required(self, vehicle, owner):
        assert validate_registration("", vehicle, owner).field == "userId"

    def test_user_id_must_be_string(self, vehicle, owner):
        result = validate_registration(42, vehicle, owner)
        assert result.field == "userId"
        assert result.message == "userId must be a string"

    def test_missing_user_id_message(self, vehicle, owner):
        assert validate_registration(None, vehicle, owner).message == "userId is required"

    def test_vehicle_checked_before_owner(self, vehicle):
        vehicle["year"] = 1800
        assert validate_registration("u-1", vehicle, None).field == "vehicle.year"

    def test_raise_for_error(self, vehicle, owner):
        vehicle["color"] = ""
        with pytest.raises(ValidationFailed) as exc:
            validate_registration("u-1", vehicle, owner).raise_for_error()
        assert exc.value.field == "vehicle.color"
        assert exc.value.status_code == 422


class TestStatusUpdateValidation:
    def test_approve_needs_no_reason(self):
        assert validate_status_update("APPROVED", None).ok

    def test_reject_requires_reason(self):
        result = validate_status_update("REJECTED", None)
        assert not result.ok
        assert result.field == "rejectionReason"

    def test_reject_blank_reason(self):
        assert not validate_status_update(RegistrationStatus.REJECTED, "   ").ok

    def test_reject_with_reason(self):
        assert validate_status_update(RegistrationStatus.REJECTED, "Plate already in use").ok

    @pytest.mark.parametrize("value", ["PENDING", "approved", None, "ARCHIVED"])
    def test_only_review_statuses_accepted(self, value):
        assert validate_status_update(value, "x").field == "status"


class TestUserValidation:
    def test_valid(self):
        assert validate_new_user("a@example.com", "p@ssw0rd", "Amina").ok

    def test_short_password(self):
        assert validate_new_user("a@example.com", "123", "Amina").field == "password"

    def test_bad_email(self):
        assert validate_new_user("nope", "p@ssw0rd", "Amina").field == "email"

    def test_full_name_required(self):
        assert validate_new_user("a@example.com", "p@ssw0rd", "").field == "fullName"
