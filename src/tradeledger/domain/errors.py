"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling. ``status_code`` is the
    HTTP-style status a request-routing layer should report.
    """

    status_code = 400


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""

    status_code = 409


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""

    status_code = 409


class InternalStorageError(DomainError):
    """The storage layer failed unexpectedly."""

    status_code = 500


class InvalidTransactionType(ValidationError):
    """Transaction type is missing or not one of purchase/sale."""


class MissingParameter(ValidationError):
    """A required query parameter was not supplied."""


class InsufficientStock(ValidationError):
    """A purchase asks for more units than a good has in stock."""

    def __init__(self, message: str, good_id: Optional[int] = None):
        super().__init__(message)
        self.good_id = good_id


class ClientNotFound(NotFoundError):
    """No acquirer or supplier with the given name exists."""


class GoodNotFound(NotFoundError):
    """Referenced good does not exist."""


class TransactionNotFound(NotFoundError):
    """Referenced transaction does not exist."""


class TransactionUpdateReversed(ConflictError):
    """An update reversed the original stock effects but could not reapply.

    The transaction record is left with ``stock_applied`` set to False and
    needs to be updated again or deleted. ``cause`` holds the failure that
    stopped the reapplication.
    """

    def __init__(self, transaction_id: int, cause: DomainError):
        super().__init__(transaction_update_reversed(transaction_id, cause))
        self.transaction_id = transaction_id
        self.cause = cause


def http_status(error: BaseException) -> int:
    """Return the status code a routing layer should use for an error."""
    if isinstance(error, DomainError):
        return error.status_code
    return 500


def invalid_transaction_type(value: object) -> str:
    """Return message for an unknown transaction type."""
    if value is None or value == "":
        return "Transaction type is required (purchase or sale)"
    return f"Invalid transaction type '{value}' (expected purchase or sale)"


def client_not_found(name: str, kind: Optional[str] = None) -> str:
    """Return message for missing client."""
    if kind is None:
        return f"Client '{name}' not found"
    return f"{kind.capitalize()} '{name}' not found"


def good_not_found(good: int | str) -> str:
    """Return message for missing good by ID or name."""
    if isinstance(good, int):
        return f"Good {good} not found"
    return f"Good '{good}' not found"


def insufficient_stock(name: str, available: int, requested: int) -> str:
    """Return message when a purchase exceeds available stock."""
    return (
        f"Insufficient stock for '{name}': {available} available, "
        f"{requested} requested"
    )


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def missing_parameter(name: str) -> str:
    """Return message for a missing required parameter."""
    return f"Parameter '{name}' is required"


def transaction_update_reversed(transaction_id: int, cause: DomainError) -> str:
    """Return message for an update that stopped after reversing stock."""
    return (
        f"Transaction {transaction_id} was reversed but not reapplied: {cause}. "
        "Update it again or delete it."
    )


def client_delete_blocked(kind: str, name: str, transaction_count: int) -> str:
    """Return message when a client still has transactions."""
    return (
        f"Cannot delete {kind} '{name}': it has {transaction_count} "
        f"transaction{'s' if transaction_count != 1 else ''}."
    )
