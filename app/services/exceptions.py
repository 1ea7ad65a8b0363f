# app/services/exceptions.py
"""
Service-layer error taxonomy.
Routers let these propagate; app.main turns each one into a JSON response
using its status_code.
"""

from typing import Optional


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        return {"detail": self.message}


class ValidationFailed(ServiceError):
    """A required field is missing or malformed. Raised before anything is persisted."""
    status_code = 422

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    def to_payload(self) -> dict:
        return {"detail": self.message, "field": self.field}


class NotFound(ServiceError):
    status_code = 404


class InvalidTransition(ServiceError):
    """Status change requested on a registration that is no longer PENDING."""
    status_code = 409


class StorageError(ServiceError):
    """Constraint violation or connectivity failure. The transaction is already rolled back."""
    status_code = 500

    def to_payload(self) -> dict:
        return {"detail": "Storage error"}


class AccessDenied(ServiceError):
    """Authorization deny result: 401 without a session, 403 on role or ownership mismatch."""

    def __init__(self, message: str, status_code: int = 403, redirect_to: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.redirect_to = redirect_to

    def to_payload(self) -> dict:
        return {"detail": self.message, "redirectTo": self.redirect_to}
