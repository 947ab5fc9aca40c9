class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a required field is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when a referenced worker (or record) does not exist."""
