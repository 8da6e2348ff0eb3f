class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced student, subject or record does not exist."""


class PersistenceError(DomainError):
    """Raised when the key-value backend cannot be read or written."""
