"""Tests for domain entities."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from tradeledger.domain.entities import (
    AcquirerRef,
    ClientKind,
    Good,
    Material,
    SupplierRef,
    Transaction,
    TransactionItem,
    TransactionType,
    client_ref,
)


class TestTransactionType:
    """Tests for TransactionType."""

    def test_purchase_is_made_by_acquirers(self):
        assert TransactionType.PURCHASE.client_kind is ClientKind.ACQUIRER

    def test_sale_is_made_by_suppliers(self):
        assert TransactionType.SALE.client_kind is ClientKind.SUPPLIER

    def test_stock_delta_sign(self):
        """Purchases take stock out, sales put it in."""
        assert TransactionType.PURCHASE.stock_delta(3) == -3
        assert TransactionType.SALE.stock_delta(3) == 3

    def test_values(self):
        assert TransactionType("purchase") is TransactionType.PURCHASE
        assert TransactionType("sale") is TransactionType.SALE
        with pytest.raises(ValueError):
            TransactionType("refund")


class TestClientRef:
    """Tests for the client reference variants."""

    def test_kind_is_fixed_by_variant(self):
        assert AcquirerRef(id=1).kind is ClientKind.ACQUIRER
        assert SupplierRef(id=1).kind is ClientKind.SUPPLIER

    def test_variants_with_same_id_differ(self):
        assert AcquirerRef(id=1) != SupplierRef(id=1)
        assert AcquirerRef(id=1) == AcquirerRef(id=1)

    def test_client_ref_builder(self):
        assert client_ref(ClientKind.ACQUIRER, 4) == AcquirerRef(id=4)
        assert client_ref(ClientKind.SUPPLIER, 4) == SupplierRef(id=4)
        assert client_ref("supplier", 2) == SupplierRef(id=2)

    def test_refs_are_hashable(self):
        refs = {AcquirerRef(id=1), AcquirerRef(id=1), SupplierRef(id=1)}
        assert len(refs) == 2


class TestTransactionItem:
    """Tests for TransactionItem."""

    def test_subtotal(self):
        item = TransactionItem(good_id=1, quantity=3, price_at_transaction=Decimal("12.50"))
        assert item.subtotal == Decimal("37.50")

    def test_item_immutability(self):
        item = TransactionItem(good_id=1, quantity=3, price_at_transaction=Decimal("12.50"))
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            item.price_at_transaction = Decimal("1")


class TestGood:
    """Tests for Good entity."""

    def test_create_good(self):
        now = datetime.now(UTC)
        good = Good(
            id=1,
            name="Silver Sword",
            description="",
            material=Material.STEEL,
            weight=Decimal("3.5"),
            value=Decimal("250"),
            stock=10,
            created_at=now,
            updated_at=now,
        )
        assert good.material is Material.STEEL
        assert good.stock == 10

    def test_good_immutability(self):
        now = datetime.now(UTC)
        good = Good(
            id=1,
            name="Silver Sword",
            description="",
            material=Material.STEEL,
            weight=Decimal("3.5"),
            value=Decimal("250"),
            stock=10,
            created_at=now,
            updated_at=now,
        )
        with pytest.raises(Exception):
            good.stock = 0


class TestTransaction:
    """Tests for Transaction entity."""

    def test_create_transaction(self):
        now = datetime.now(UTC)
        items = (
            TransactionItem(good_id=1, quantity=2, price_at_transaction=Decimal("250")),
            TransactionItem(good_id=2, quantity=1, price_at_transaction=Decimal("80")),
        )
        txn = Transaction(
            id=1,
            type=TransactionType.PURCHASE,
            date=now,
            client=AcquirerRef(id=1),
            items=items,
            total_amount=Decimal("580"),
            stock_applied=True,
            created_at=now,
            updated_at=now,
        )
        assert txn.client.kind is ClientKind.ACQUIRER
        assert sum(item.subtotal for item in txn.items) == txn.total_amount
