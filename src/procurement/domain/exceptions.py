"""Domain-level exceptions.

Every broken business rule in the procurement domain surfaces as a
ValidationError so the CLI layer can catch DomainException uniformly and
display a readable message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""
