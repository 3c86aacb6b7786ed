class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class TierConfigurationError(ValidationError):
    """Raised when a rate tier group cannot be billed against consistently."""
