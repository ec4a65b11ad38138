class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidFormatError(ValidationError):
    """Raised when a time string cannot be parsed into hours:minutes."""


class NotFoundError(DomainError):
    """Raised when a referenced driver or record does not exist."""
