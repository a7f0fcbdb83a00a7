from __future__ import annotations


class DomainError(Exception):
    """Base class for errors shown to the user as-is."""


class ValidationError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class ConflictError(DomainError):
    pass


class RepositoryError(DomainError):
    """A read or write against the store failed."""
