"""Domain-level exceptions.

Every rejected input is expressed as a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidInputError(DomainException):
    """A required value is missing or malformed."""
