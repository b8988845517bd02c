"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InsufficientStockError(ValidationError):
    """More on-hand units were requested than the variant holds."""


class InvalidOperationError(DomainException):
    """The operation is ambiguous or not allowed for the entity's current shape."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
