"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional, Sequence
from datetime import datetime
from decimal import Decimal

# Only entities are imported here; the domain services depend on this module
from tradeledger.domain.entities import (
    Acquirer,
    AcquirerType,
    ClientRef,
    Good,
    Material,
    Supplier,
    SupplierSpecialty,
    Transaction,
    TransactionItem,
    TransactionType,
)


class Database(ABC):
    """Abstract database interface for tradeledger."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def unit_of_work(self) -> AbstractContextManager[None]:
        """Group writes into a single commit.

        Writes issued inside the block are committed together when it exits
        normally and rolled back if it raises. Outside a unit of work every
        write commits on its own.
        """
        pass

    # Good operations
    @abstractmethod
    def create_good(
        self,
        good_id: int,
        name: str,
        material: Material,
        weight: Decimal,
        value: Decimal,
        stock: int = 0,
        description: str = "",
    ) -> int:
        """Create a good with its initial stock. Returns good ID."""
        pass

    @abstractmethod
    def get_good(self, good_id: int) -> Optional[Good]:
        """Get good by ID."""
        pass

    @abstractmethod
    def get_good_by_name(self, name: str) -> Optional[Good]:
        """Get good by name."""
        pass

    @abstractmethod
    def list_goods(self, name: Optional[str] = None) -> list[Good]:
        """List goods, optionally filtered by exact name."""
        pass

    @abstractmethod
    def update_good(
        self,
        good_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        material: Optional[Material] = None,
        weight: Optional[Decimal] = None,
        value: Optional[Decimal] = None,
    ) -> None:
        """Update descriptive good fields. Stock is not updatable here."""
        pass

    @abstractmethod
    def delete_good(self, good_id: int) -> None:
        """Delete a good."""
        pass

    # Stock ledger
    @abstractmethod
    def adjust_stock(self, good_id: int, delta: int) -> int:
        """Atomically add ``delta`` to a good's stock. Returns the new stock.

        Raises:
            GoodNotFound: If the good does not exist
            InsufficientStock: If the store rejects the resulting stock
        """
        pass

    # Acquirer operations
    @abstractmethod
    def create_acquirer(
        self,
        name: str,
        type: AcquirerType = AcquirerType.VILLAGER,
        experience: int = 0,
        preferred_weapon: str = "",
        coins: int = 0,
        is_active: bool = True,
        email: str = "",
        monster_specialties: Sequence[str] = (),
    ) -> int:
        """Create an acquirer. Returns acquirer ID."""
        pass

    @abstractmethod
    def get_acquirer(self, acquirer_id: int) -> Optional[Acquirer]:
        """Get acquirer by ID."""
        pass

    @abstractmethod
    def get_acquirer_by_name(self, name: str) -> Optional[Acquirer]:
        """Get acquirer by name."""
        pass

    @abstractmethod
    def list_acquirers(self, name: Optional[str] = None) -> list[Acquirer]:
        """List acquirers, optionally filtered by exact name."""
        pass

    @abstractmethod
    def update_acquirer(
        self,
        acquirer_id: int,
        name: Optional[str] = None,
        type: Optional[AcquirerType] = None,
        experience: Optional[int] = None,
        preferred_weapon: Optional[str] = None,
        coins: Optional[int] = None,
        is_active: Optional[bool] = None,
        email: Optional[str] = None,
        monster_specialties: Optional[Sequence[str]] = None,
    ) -> None:
        """Update acquirer fields; None leaves a field unchanged."""
        pass

    @abstractmethod
    def delete_acquirer(self, acquirer_id: int) -> None:
        """Delete an acquirer."""
        pass

    # Supplier operations
    @abstractmethod
    def create_supplier(
        self,
        name: str,
        specialty: SupplierSpecialty = SupplierSpecialty.PEDDLER,
        location: str = "",
        is_traveling: bool = False,
        inventory_size: int = 1,
        reputation: int = 0,
        contact: str = "",
    ) -> int:
        """Create a supplier. Returns supplier ID."""
        pass

    @abstractmethod
    def get_supplier(self, supplier_id: int) -> Optional[Supplier]:
        """Get supplier by ID."""
        pass

    @abstractmethod
    def get_supplier_by_name(self, name: str) -> Optional[Supplier]:
        """Get supplier by name."""
        pass

    @abstractmethod
    def list_suppliers(self, name: Optional[str] = None) -> list[Supplier]:
        """List suppliers, optionally filtered by exact name."""
        pass

    @abstractmethod
    def update_supplier(
        self,
        supplier_id: int,
        name: Optional[str] = None,
        specialty: Optional[SupplierSpecialty] = None,
        location: Optional[str] = None,
        is_traveling: Optional[bool] = None,
        inventory_size: Optional[int] = None,
        reputation: Optional[int] = None,
        contact: Optional[str] = None,
    ) -> None:
        """Update supplier fields; None leaves a field unchanged."""
        pass

    @abstractmethod
    def delete_supplier(self, supplier_id: int) -> None:
        """Delete a supplier."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        type: TransactionType,
        client: ClientRef,
        items: Sequence[TransactionItem],
        total_amount: Decimal,
        date: Optional[datetime] = None,
    ) -> int:
        """Create a transaction record. Returns transaction ID.

        Only writes the record; stock is changed through ``adjust_stock``.
        """
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def replace_transaction(
        self,
        transaction_id: int,
        type: TransactionType,
        client: ClientRef,
        items: Sequence[TransactionItem],
        total_amount: Decimal,
    ) -> None:
        """Overwrite type, client, items and total of a transaction.

        The record is marked as having its stock effects applied.
        """
        pass

    @abstractmethod
    def set_transaction_stock_applied(self, transaction_id: int, applied: bool) -> None:
        """Record whether the transaction's stock effects are applied."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction record."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        clients: Optional[Sequence[ClientRef]] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        type: Optional[TransactionType] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters, oldest first.

        Args:
            clients: Only transactions referencing one of these clients
            start: Inclusive lower bound on the transaction date
            end: Inclusive upper bound on the transaction date
            type: Only transactions of this type
        """
        pass

    @abstractmethod
    def count_client_transactions(self, client: ClientRef) -> int:
        """Count transactions referencing a client."""
        pass

    @abstractmethod
    def count_good_transaction_items(self, good_id: int) -> int:
        """Count transaction items that name a good ID."""
        pass
