class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidHoursError(ValidationError):
    """Raised when an hours value is missing or not a finite real number."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or work session does not exist."""


class SessionStoreError(DomainError):
    """Raised when work sessions cannot be read from or written to the store."""
