class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class TokenFormatError(ValidationError):
    """Raised when a check-in token payload is missing fields or malformed."""


class TokenExpiredError(DomainError):
    """Raised when a structurally valid check-in token is past its expiry."""
