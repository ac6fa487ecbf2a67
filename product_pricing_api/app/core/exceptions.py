"""
Domain exceptions raised by the store, the services and the token verifier.

Each exception carries the HTTP status code the API layer answers with,
so endpoint handlers can translate any of them with
:meth:`PricingError.to_http_exception`.  Store faults deliberately keep
the driver's message text; it is passed through to the client as is.
"""

from fastapi import HTTPException, status


class PricingError(Exception):
    """Base class for all errors raised by the application."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "An error occurred") -> None:
        self.message = message
        super().__init__(message)

    def to_http_exception(self, prefix: str = "") -> HTTPException:
        """Convert to a FastAPI ``HTTPException`` with the mapped status."""
        return HTTPException(status_code=self.status_code, detail=f"{prefix}{self.message}")


class StoreError(PricingError):
    """Raised when the database driver reports a fault."""


class StoreUnavailable(StoreError):
    """Raised when no database connection is available."""

    def __init__(self, message: str = "Database connection is not established") -> None:
        super().__init__(message)


class ValidationConflict(StoreError):
    """Raised when a unique constraint is violated.

    Duplicate usernames and series names surface to clients as server
    errors, the same way any other store fault does.
    """


class NotFound(PricingError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidReference(PricingError):
    """Raised when a record references a series that does not exist."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidCredentials(PricingError):
    """Raised on login with an unknown username or a wrong password."""

    status_code = status.HTTP_400_BAD_REQUEST


class TokenError(PricingError):
    """Base class for access token failures."""


class MissingToken(TokenError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Token is required") -> None:
        super().__init__(message)


class InvalidToken(TokenError):
    """Raised for malformed, tampered or expired tokens.

    Answered with 500 rather than 401; existing clients depend on it.
    """

    def __init__(self, message: str = "Invalid Token", reason: str = "") -> None:
        self.reason = reason
        super().__init__(message)
