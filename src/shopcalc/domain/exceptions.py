"""Domain-level exceptions.

Invariant violations are expressed as subclasses of DomainException so
the CLI layer can catch them uniformly and display user-friendly messages.
Input coming straight from the till (prices, weights, calculator keys)
is validated more leniently: the handlers turn those errors into no-ops.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
