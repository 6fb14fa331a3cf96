class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DateParseError(ValidationError):
    """Raised when a date string is not a valid YYYY-MM-DD calendar date."""


class StoreError(DomainError):
    """Raised when the record store cannot be reached or a query fails."""
