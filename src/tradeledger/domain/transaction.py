"""Transaction domain service.

Every stock change in the system goes through this module. Creating,
updating and deleting a transaction all follow the same two phases:

1. Planning resolves the client and every good, checks quantities and stock,
   and produces a list of ``StockMutation`` intents. Nothing is written.
2. Committing applies the intents through ``Database.adjust_stock`` and
   writes the transaction record inside one ``unit_of_work``.

A failure in planning therefore never leaves partial stock changes behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Union

from tradeledger.domain.client_resolver import ClientResolver, parse_transaction_type
from tradeledger.domain.entities import (
    Good,
    ItemRequest,
    StockMutation,
    Transaction as TransactionEntity,
    TransactionItem,
    TransactionType,
)
from tradeledger.domain.errors import (
    DomainError,
    GoodNotFound,
    InsufficientStock,
    TransactionNotFound,
    TransactionUpdateReversed,
    ValidationError,
    good_not_found,
    insufficient_stock,
    transaction_not_found,
)
from tradeledger.utils.date_parser import to_storage_datetime

if TYPE_CHECKING:
    from tradeledger.database.base import Database

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionPlan:
    """Validated, not yet applied, effect of a transaction request."""

    type: TransactionType
    items: tuple[TransactionItem, ...]
    mutations: tuple[StockMutation, ...]
    total_amount: Decimal


def _merge_mutations(deltas: Iterable[tuple[int, int]]) -> tuple[StockMutation, ...]:
    """Sum deltas per good, ordered by good ID, dropping zero changes."""
    totals: dict[int, int] = {}
    for good_id, delta in deltas:
        totals[good_id] = totals.get(good_id, 0) + delta
    return tuple(
        StockMutation(good_id=good_id, delta=delta)
        for good_id, delta in sorted(totals.items())
        if delta != 0
    )


def reversal_mutations(transaction: TransactionEntity) -> tuple[StockMutation, ...]:
    """Stock mutations that undo a transaction's applied effects."""
    return _merge_mutations(
        (item.good_id, -transaction.type.stock_delta(item.quantity))
        for item in transaction.items
    )


class TransactionService:
    """Service for creating, updating and deleting transactions."""

    def __init__(self, db: Database, resolver: Optional[ClientResolver] = None):
        """Initialize transaction service.

        Args:
            db: Database instance
            resolver: Client resolver; one is built on ``db`` if omitted
        """
        self.db = db
        self.resolver = resolver or ClientResolver(db)

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID or raise TransactionNotFound."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise TransactionNotFound(transaction_not_found(transaction_id))
        return txn

    def plan(
        self, type: Union[str, TransactionType], items: Sequence[ItemRequest]
    ) -> TransactionPlan:
        """Validate a request and compute its effect without writing anything.

        Quantities for the same good on several lines are added up before
        the stock check.

        Args:
            type: Transaction type
            items: Requested line items

        Returns:
            TransactionPlan with item snapshots, stock intents and total

        Raises:
            InvalidTransactionType: If type is unknown
            ValidationError: If items is empty or a quantity is not a positive integer
            GoodNotFound: If any named good doesn't exist
            InsufficientStock: If a purchase exceeds a good's stock
        """
        txn_type = parse_transaction_type(type)
        if not items:
            raise ValidationError("A transaction needs at least one item")
        for request in items:
            quantity = request.quantity
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
                raise ValidationError(
                    f"Quantity for '{request.good_name}' must be an integer of at least 1"
                )

        goods: dict[str, Good] = {}
        missing: list[str] = []
        for request in items:
            if request.good_name in goods or request.good_name in missing:
                continue
            good = self.db.get_good_by_name(request.good_name)
            if good is None:
                missing.append(request.good_name)
            else:
                goods[request.good_name] = good
        if missing:
            logger.warning("Rejected %s: unknown goods %s", txn_type.value, missing)
            raise GoodNotFound(
                "; ".join(good_not_found(name) for name in missing)
            )

        if txn_type is TransactionType.PURCHASE:
            requested: dict[int, int] = {}
            for request in items:
                good_id = goods[request.good_name].id
                requested[good_id] = requested.get(good_id, 0) + request.quantity
            for good in goods.values():
                if good.stock < requested[good.id]:
                    logger.warning(
                        "Rejected purchase: good %s has %s in stock, %s requested",
                        good.id,
                        good.stock,
                        requested[good.id],
                    )
                    raise InsufficientStock(
                        insufficient_stock(good.name, good.stock, requested[good.id]),
                        good_id=good.id,
                    )

        snapshots = tuple(
            TransactionItem(
                good_id=goods[request.good_name].id,
                quantity=request.quantity,
                price_at_transaction=goods[request.good_name].value,
            )
            for request in items
        )
        total = sum((item.subtotal for item in snapshots), Decimal("0"))
        mutations = _merge_mutations(
            (item.good_id, txn_type.stock_delta(item.quantity)) for item in snapshots
        )
        return TransactionPlan(
            type=txn_type, items=snapshots, mutations=mutations, total_amount=total
        )

    def _apply(self, mutations: Iterable[StockMutation], skip_missing: bool = False) -> None:
        """Apply stock intents through the stock ledger.

        Args:
            mutations: Intents to apply
            skip_missing: If True, goods that no longer exist are skipped
        """
        for mutation in mutations:
            try:
                self.db.adjust_stock(mutation.good_id, mutation.delta)
            except GoodNotFound:
                if not skip_missing:
                    raise
                logger.warning(
                    "Skipped stock reversal of %+d for deleted good %s",
                    mutation.delta,
                    mutation.good_id,
                )

    def create_transaction(
        self,
        type: Union[str, TransactionType],
        client_name: str,
        items: Sequence[ItemRequest],
        date: Optional[datetime] = None,
    ) -> TransactionEntity:
        """Create a transaction and apply its stock effects.

        Args:
            type: "purchase" (acquirer buys, stock decreases) or "sale"
                (supplier sells, stock increases)
            client_name: Acquirer or supplier name, depending on type
            items: Requested line items
            date: Transaction timestamp; defaults to now

        Returns:
            The persisted transaction

        Raises:
            InvalidTransactionType: If type is unknown
            ClientNotFound: If the client doesn't exist
            GoodNotFound: If any good doesn't exist
            InsufficientStock: If a purchase exceeds available stock
            ValidationError: If the items are invalid
        """
        txn_type = parse_transaction_type(type)
        client = self.resolver.resolve(txn_type, client_name)
        plan = self.plan(txn_type, items)

        with self.db.unit_of_work():
            self._apply(plan.mutations)
            transaction_id = self.db.create_transaction(
                type=plan.type,
                client=client,
                items=plan.items,
                total_amount=plan.total_amount,
                date=to_storage_datetime(date) if date is not None else None,
            )

        logger.info(
            "Created %s transaction %s for %s %s: %d item(s), total %s",
            plan.type.value,
            transaction_id,
            client.kind.value,
            client.id,
            len(plan.items),
            plan.total_amount,
        )
        return self.require_transaction(transaction_id)

    def update_transaction(
        self,
        transaction_id: int,
        type: Union[str, TransactionType],
        client_name: str,
        items: Sequence[ItemRequest],
    ) -> TransactionEntity:
        """Replace a transaction as a whole, moving stock accordingly.

        The stock effects of the current items are reversed and committed
        first. The new request is then validated against the reversed stock
        and applied together with the new record. If that validation fails
        the store stays reversed: the record keeps its old items, is marked
        ``stock_applied=False`` and TransactionUpdateReversed is raised.

        Args:
            transaction_id: Transaction ID to update
            type: New transaction type
            client_name: New client name
            items: New line items

        Returns:
            The updated transaction

        Raises:
            TransactionNotFound: If the transaction doesn't exist
            InvalidTransactionType: If type is unknown
            ClientNotFound: If the client doesn't exist
            InsufficientStock: If reversing a sale would take a good's stock
                below zero (nothing is changed in that case)
            TransactionUpdateReversed: If the new items fail validation after
                the original items were reversed
        """
        existing = self.require_transaction(transaction_id)
        txn_type = parse_transaction_type(type)
        client = self.resolver.resolve(txn_type, client_name)

        if existing.stock_applied:
            with self.db.unit_of_work():
                self._apply(reversal_mutations(existing), skip_missing=True)
                self.db.set_transaction_stock_applied(transaction_id, False)
            logger.info("Reversed stock effects of transaction %s", transaction_id)

        try:
            plan = self.plan(txn_type, items)
            with self.db.unit_of_work():
                self._apply(plan.mutations)
                self.db.replace_transaction(
                    transaction_id=transaction_id,
                    type=plan.type,
                    client=client,
                    items=plan.items,
                    total_amount=plan.total_amount,
                )
        except DomainError as e:
            logger.warning(
                "Transaction %s left reversed, update not applied: %s", transaction_id, e
            )
            raise TransactionUpdateReversed(transaction_id, e) from e

        logger.info(
            "Updated transaction %s to %s: %d item(s), total %s",
            transaction_id,
            plan.type.value,
            len(plan.items),
            plan.total_amount,
        )
        return self.require_transaction(transaction_id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction after reversing its stock effects.

        Goods that have been deleted since are skipped; the deletion still
        goes through.

        Args:
            transaction_id: Transaction ID to delete

        Raises:
            TransactionNotFound: If the transaction doesn't exist
            InsufficientStock: If reversing a sale would take a good's
                stock below zero (nothing is changed in that case)
        """
        existing = self.require_transaction(transaction_id)

        with self.db.unit_of_work():
            if existing.stock_applied:
                self._apply(reversal_mutations(existing), skip_missing=True)
            self.db.delete_transaction(transaction_id)

        logger.info("Deleted transaction %s", transaction_id)
