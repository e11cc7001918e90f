class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class InvalidTimeFormat(ValidationError):
    """Raised when a time of day is not a strict 24-hour HH:MM string."""


class InvalidTimeRange(ValidationError):
    """Raised when a slot does not start strictly before it ends."""


class InvalidToleranceRange(ValidationError):
    """Raised when a tolerance is outside the configurable range."""


class UnrecognizedStrategyKind(ValidationError):
    """Raised when a stored strategy label matches no known strategy."""


class ScheduleConflictError(ValidationError):
    """Raised when an enrollment or slot would double-book a weekly time range."""
