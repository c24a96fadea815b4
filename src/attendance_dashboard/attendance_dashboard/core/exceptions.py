class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedTimeError(ValidationError):
    """Raised when a clock value does not parse as a valid HH:MM time."""


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""


class UnknownEmployeeError(NotFoundError):
    """Raised when an employee id is not present in the roster."""
