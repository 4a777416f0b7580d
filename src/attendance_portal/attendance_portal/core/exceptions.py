from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a user or attendance record id cannot be resolved."""


class AuthenticationError(DomainError):
    """Raised when a session cannot be started."""


class InactiveUserError(AuthenticationError):
    """Raised when a terminated user tries to log in."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class AlreadyMarkedError(DomainError):
    """Raised when attendance for the same owner and day already exists."""


class InvalidTransitionError(DomainError):
    """Raised when a review targets a record that is no longer pending."""


class GatewayError(DomainError):
    """Raised when the backing store fails (transport or backend error).

    ``message`` carries the backend's human readable message when it sent one.
    """

    def __init__(self, message: Optional[str] = None, *, status_code: Optional[int] = None):
        super().__init__(message or "Backend request failed")
        self.message = message
        self.status_code = status_code
