"""Tests for domain error types and status codes."""

import pytest

from tradeledger.domain.errors import (
    ClientNotFound,
    ConflictError,
    DependencyError,
    DomainError,
    GoodNotFound,
    InsufficientStock,
    InternalStorageError,
    InvalidTransactionType,
    MissingParameter,
    TransactionNotFound,
    TransactionUpdateReversed,
    ValidationError,
    http_status,
    insufficient_stock,
    invalid_transaction_type,
)


@pytest.mark.parametrize(
    "error,status",
    [
        (InvalidTransactionType("bad"), 400),
        (MissingParameter("bad"), 400),
        (InsufficientStock("bad"), 400),
        (ClientNotFound("bad"), 404),
        (GoodNotFound("bad"), 404),
        (TransactionNotFound("bad"), 404),
        (ConflictError("bad"), 409),
        (DependencyError("bad"), 409),
        (InternalStorageError("bad"), 500),
        (RuntimeError("bad"), 500),
    ],
)
def test_http_status(error, status):
    assert http_status(error) == status


def test_domain_errors_are_value_errors():
    assert issubclass(DomainError, ValueError)
    assert issubclass(InsufficientStock, ValidationError)
    assert issubclass(ClientNotFound, DomainError)


def test_insufficient_stock_carries_good_id():
    error = InsufficientStock(insufficient_stock("Silver Sword", 3, 5), good_id=1)
    assert error.good_id == 1
    assert str(error) == "Insufficient stock for 'Silver Sword': 3 available, 5 requested"


def test_update_reversed_wraps_cause():
    cause = GoodNotFound("Good 'Ghost Blade' not found")
    error = TransactionUpdateReversed(7, cause)

    assert error.transaction_id == 7
    assert error.cause is cause
    assert http_status(error) == 409
    assert "Transaction 7 was reversed but not reapplied" in str(error)
    assert "Ghost Blade" in str(error)


def test_invalid_transaction_type_message():
    assert "required" in invalid_transaction_type(None)
    assert "'refund'" in invalid_transaction_type("refund")
