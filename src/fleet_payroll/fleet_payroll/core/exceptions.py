class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class ConfigurationError(DomainError):
    """Raised when a company's payroll setup is incomplete (e.g. no default rate)."""


class InvalidShiftError(ValidationError):
    """Raised when a single shift cannot be priced (open, empty or reversed)."""


class HolidayFeedError(DomainError):
    """Raised when the public bank holiday feed cannot be fetched or parsed."""
