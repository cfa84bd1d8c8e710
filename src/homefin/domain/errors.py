"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidAmountError(ValidationError):
    """Monetary amount or installment count outside its allowed range."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ReferentialError(DomainError):
    """Entity references another entity that does not exist."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class UpstreamError(Exception):
    """External collaborator (insight generator) failed or ran out of quota."""

    def __init__(self, message: str, quota_exhausted: bool = False):
        super().__init__(message)
        self.quota_exhausted = quota_exhausted


def not_found(kind: str, entity_id: int) -> str:
    """Return message for a missing entity."""
    return f"{kind} {entity_id} not found"


def card_not_found(card_id: int) -> str:
    """Return message for a card transaction pointing at a missing card."""
    return f"Credit card {card_id} does not exist"


def card_delete_blocked(card_id: int, transaction_count: int) -> str:
    """Return message when a card still has transactions."""
    return (
        f"Cannot delete credit card {card_id}: it has {transaction_count} "
        f"transaction{'s' if transaction_count != 1 else ''}. "
        "Please delete them first."
    )


def required_field(field_name: str) -> str:
    """Return message for a missing required field."""
    return f"{field_name} is required"
