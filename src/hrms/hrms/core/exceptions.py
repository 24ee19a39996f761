class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class UnauthorizedError(DomainError):
    """Raised when a session token is missing, malformed, expired or revoked."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a record identifier does not exist."""


class ConflictError(DomainError):
    """Raised when a record would break a uniqueness rule."""


class InvalidTransitionError(DomainError):
    """Raised when a status change is not allowed from the current state."""
