class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced intern does not exist."""


class LogSinkClosedError(DomainError):
    """Raised when writing to a log sink that is not open."""
