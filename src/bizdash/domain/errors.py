"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Input failed a field constraint.

    ``errors`` maps each offending field to its message so a form can show
    every message next to the field it belongs to.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__(" ".join(self.errors.values()))

    @property
    def field(self) -> Optional[str]:
        """Return the first offending field name."""
        return next(iter(self.errors), None)


class NotFoundError(DomainError):
    """Requested record does not exist in the user's collection."""


class ComputationError(DomainError):
    """Arithmetic result is not a finite number or the input cannot be evaluated."""


class StoreWriteFailure(DomainError):
    """A scheduled create/update/delete failed in the backing store."""

    def __init__(self, operation: str, kind: str, record_id: str, cause: BaseException):
        self.operation = operation
        self.kind = kind
        self.record_id = record_id
        self.cause = cause
        super().__init__(f"Could not {operation} {kind} record {record_id}: {cause}")


def field_error(field: str, message: str) -> ValidationError:
    """Return a validation error for a single field."""
    return ValidationError({field: message})


def record_not_found(kind: str, record_id: str) -> str:
    """Return message for a missing record."""
    return f"{kind.capitalize()} {record_id} not found"
