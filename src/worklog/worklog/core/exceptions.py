class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UnknownEventKindError(ValidationError):
    """Raised when an event carries a kind outside the known set.

    The whole computation is rejected; dropping the event silently could
    hide a schema change upstream.
    """


class ConfigurationError(DomainError):
    """Raised when boundary or policy settings are invalid."""
