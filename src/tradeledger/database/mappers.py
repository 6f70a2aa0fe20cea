"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so the domain never handles ORM
instances, and schema changes stay inside the database package.
"""

from typing import Sequence

from tradeledger.domain import entities as domain
from tradeledger.database.models import (
    Good as ORMGood,
    Acquirer as ORMAcquirer,
    Supplier as ORMSupplier,
    Transaction as ORMTransaction,
    TransactionItem as ORMTransactionItem,
)


def good_to_domain(orm_good: ORMGood) -> domain.Good:
    """Convert SQLAlchemy Good model to domain Good entity."""
    return domain.Good(
        id=orm_good.id,
        name=orm_good.name,
        description=orm_good.description or "",
        material=domain.Material(orm_good.material),
        weight=orm_good.weight,
        value=orm_good.value,
        stock=orm_good.stock,
        created_at=orm_good.created_at,
        updated_at=orm_good.updated_at,
    )


def acquirer_to_domain(orm_acquirer: ORMAcquirer) -> domain.Acquirer:
    """Convert SQLAlchemy Acquirer model to domain Acquirer entity."""
    return domain.Acquirer(
        id=orm_acquirer.id,
        name=orm_acquirer.name,
        type=domain.AcquirerType(orm_acquirer.type),
        experience=orm_acquirer.experience,
        preferred_weapon=orm_acquirer.preferred_weapon or "",
        coins=orm_acquirer.coins,
        is_active=orm_acquirer.is_active,
        email=orm_acquirer.email or "",
        monster_specialties=tuple(orm_acquirer.monster_specialties or ()),
        created_at=orm_acquirer.created_at,
        updated_at=orm_acquirer.updated_at,
    )


def supplier_to_domain(orm_supplier: ORMSupplier) -> domain.Supplier:
    """Convert SQLAlchemy Supplier model to domain Supplier entity."""
    return domain.Supplier(
        id=orm_supplier.id,
        name=orm_supplier.name,
        location=orm_supplier.location or "",
        specialty=domain.SupplierSpecialty(orm_supplier.specialty),
        is_traveling=orm_supplier.is_traveling,
        inventory_size=orm_supplier.inventory_size,
        reputation=orm_supplier.reputation,
        contact=orm_supplier.contact or "",
        created_at=orm_supplier.created_at,
        updated_at=orm_supplier.updated_at,
    )


def transaction_item_to_domain(orm_item: ORMTransactionItem) -> domain.TransactionItem:
    """Convert SQLAlchemy TransactionItem model to domain TransactionItem entity."""
    return domain.TransactionItem(
        good_id=orm_item.good_id,
        quantity=orm_item.quantity,
        price_at_transaction=orm_item.price_at_transaction,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        type=domain.TransactionType(orm_transaction.type),
        date=orm_transaction.date,
        client=domain.client_ref(
            domain.ClientKind(orm_transaction.client_kind), orm_transaction.client_id
        ),
        items=tuple(transaction_item_to_domain(item) for item in orm_transaction.items),
        total_amount=orm_transaction.total_amount,
        stock_applied=orm_transaction.stock_applied,
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )


def transaction_items_to_orm(items: Sequence[domain.TransactionItem]) -> list[ORMTransactionItem]:
    """Convert domain TransactionItem entities to new SQLAlchemy rows."""
    return [
        ORMTransactionItem(
            position=position,
            good_id=item.good_id,
            quantity=item.quantity,
            price_at_transaction=item.price_at_transaction,
        )
        for position, item in enumerate(items)
    ]
