"""Domain-level exceptions.

Malformed input and broken invariants are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly. Ordinary
business outcomes (unknown product, sold out, not enough money) are
*not* exceptions; see ``PurchaseResult``.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or an invariant was violated."""
