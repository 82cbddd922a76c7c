"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each subclass is one kind of failure; the message is a short description.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CapacityExceededError(DomainException):
    """A bounded collection cannot take another entry."""


class QuantityOverflowError(CapacityExceededError):
    """A cart line quantity would exceed the largest allowed value."""


class LedgerFullError(CapacityExceededError):
    """The order history has reached its configured capacity."""


class EmptyCartError(DomainException):
    """The cart has no lines to review or check out."""


class InvalidSelectionError(DomainException):
    """A menu index does not name a known option."""


class SinkUnavailableError(DomainException):
    """The order log could not be opened or written."""
