"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CapacityExceededError(ValidationError):
    """A configured maximum (cart lines, stored orders) was reached."""


class CheckoutStateError(ValidationError):
    """A checkout step was requested from the wrong workflow state."""


class PaymentError(DomainException):
    """The payment could not be executed. The checkout can be retried."""


class AuditLogError(DomainException):
    """The audit record could not be written."""


class ConfigurationError(DomainException):
    """Invalid configuration or catalog data."""
