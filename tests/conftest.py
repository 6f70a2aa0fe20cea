"""Shared pytest fixtures for tradeledger tests."""

import logging
import tempfile
import os
from decimal import Decimal
import pytest

from tradeledger.database.factories import create_sqlite_database
from tradeledger.domain.client import AcquirerService, SupplierService
from tradeledger.domain.client_resolver import ClientResolver
from tradeledger.domain.good import GoodService
from tradeledger.domain.transaction import TransactionService
from tradeledger.domain.transaction_query import TransactionQueryService


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a test's stderr."""
    yield
    logger = logging.getLogger("tradeledger")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def good_service(temp_db):
    """Create a GoodService with a temporary database."""
    return GoodService(temp_db)


@pytest.fixture
def acquirer_service(temp_db):
    """Create an AcquirerService with a temporary database."""
    return AcquirerService(temp_db)


@pytest.fixture
def supplier_service(temp_db):
    """Create a SupplierService with a temporary database."""
    return SupplierService(temp_db)


@pytest.fixture
def client_resolver(temp_db):
    """Create a ClientResolver with a temporary database."""
    return ClientResolver(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def query_service(temp_db):
    """Create a TransactionQueryService with a temporary database."""
    return TransactionQueryService(temp_db)


@pytest.fixture
def silver_sword(good_service):
    """Good with stock 10 and value 250."""
    good_service.create_good(
        good_id=1,
        name="Silver Sword",
        material="steel",
        weight=Decimal("3.5"),
        value=Decimal("250"),
        stock=10,
        description="Sharp against monsters",
    )
    return good_service.get_good(1)


@pytest.fixture
def oak_shield(good_service):
    """Good with stock 5 and value 80."""
    good_service.create_good(
        good_id=2,
        name="Oak Shield",
        material="wood",
        weight=Decimal("6"),
        value=Decimal("80"),
        stock=5,
    )
    return good_service.get_good(2)


@pytest.fixture
def geralt(acquirer_service):
    """Sample acquirer."""
    acquirer_id = acquirer_service.create_acquirer("Geralt")
    return acquirer_service.get_acquirer(acquirer_id)


@pytest.fixture
def zoltan(supplier_service):
    """Sample supplier."""
    supplier_id = supplier_service.create_supplier("Zoltan")
    return supplier_service.get_supplier(supplier_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
