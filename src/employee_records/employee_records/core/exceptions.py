from __future__ import annotations

from typing import Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations.

    Every subclass carries the HTTP status it is rendered with, so controllers
    never translate errors by hand.
    """

    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[Sequence[dict]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class Conflict(ValidationError):
    """Raised when a unique field (employeeId, email, username) is taken."""

    default_message = "Record with this identifier already exists"


class AuthenticationError(DomainError):
    status_code = 401
    default_message = "Authentication failed"


class InvalidCredentials(AuthenticationError):
    """Bad identifier or bad secret; both cases share this exact error."""

    default_message = "Invalid credentials"


class Unauthenticated(AuthenticationError):
    """Missing, invalid or expired bearer token."""

    default_message = "Invalid token"


class InvalidClaimTarget(DomainError):
    """Unknown or non-active employeeId at claim time; both cases share this error."""

    default_message = "Invalid employee ID or employee is not active"


class AlreadyClaimed(DomainError):
    default_message = "Employee account already exists. Please login instead."


class AuthorizationError(DomainError):
    """Raised when a principal lacks the role for an action."""

    status_code = 403
    default_message = "Access denied"


Forbidden = AuthorizationError


class NotFound(DomainError):
    status_code = 404
    default_message = "Not found"


class StoreError(DomainError):
    """Store or crypto failure. Details are logged, never sent to the client."""

    status_code = 500
    default_message = "Server error, please retry the request"
