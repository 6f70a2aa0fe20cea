"""Read-only transaction queries."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional, Union

from tradeledger.domain.client_resolver import ClientResolver, parse_transaction_type
from tradeledger.domain.entities import (
    Good,
    ItemDetails,
    Transaction as TransactionEntity,
    TransactionDetails,
    TransactionType,
)
from tradeledger.domain.errors import (
    ClientNotFound,
    MissingParameter,
    TransactionNotFound,
    ValidationError,
    client_not_found,
    missing_parameter,
    transaction_not_found,
)
from tradeledger.utils.date_parser import parse_range_bound

if TYPE_CHECKING:
    from tradeledger.database.base import Database

DateBound = Union[str, date, datetime, None]


def _is_blank(value: DateBound) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class TransactionQueryService:
    """Service for looking up transactions with clients and goods populated."""

    def __init__(self, db: Database, resolver: Optional[ClientResolver] = None):
        """Initialize transaction query service.

        Args:
            db: Database instance
            resolver: Client resolver; one is built on ``db`` if omitted
        """
        self.db = db
        self.resolver = resolver or ClientResolver(db)

    def get_transaction_details(self, transaction_id: int) -> TransactionDetails:
        """Get a transaction with its client and goods.

        Raises:
            TransactionNotFound: If the transaction doesn't exist
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise TransactionNotFound(transaction_not_found(transaction_id))
        return self._populate([txn])[0]

    def find_by_client_name(self, client_name: Optional[str]) -> list[TransactionDetails]:
        """Find all transactions of the client(s) with this name.

        The name is looked up among acquirers and suppliers alike; when both
        collections contain it, transactions of both are returned.

        Args:
            client_name: Client name

        Returns:
            Transactions ordered by date

        Raises:
            MissingParameter: If client_name is blank
            ClientNotFound: If neither an acquirer nor a supplier has that name
        """
        name = (client_name or "").strip()
        if not name:
            raise MissingParameter(missing_parameter("client_name"))

        refs = self.resolver.find_by_name(name)
        if not refs:
            raise ClientNotFound(client_not_found(name))

        return self._populate(self.db.list_transactions(clients=refs))

    def find_by_date_range(
        self,
        start: DateBound,
        end: DateBound,
        type: Union[str, TransactionType, None] = None,
    ) -> list[TransactionDetails]:
        """Find transactions dated within ``[start, end]``.

        Args:
            start: Start of the range (inclusive)
            end: End of the range (inclusive; a bare date covers the whole day)
            type: Optional transaction type filter

        Returns:
            Matching transactions ordered by date; empty if none match

        Raises:
            MissingParameter: If start or end is missing
            ValidationError: If start or end cannot be parsed
            InvalidTransactionType: If type is given but unknown
        """
        if _is_blank(start):
            raise MissingParameter(missing_parameter("start"))
        if _is_blank(end):
            raise MissingParameter(missing_parameter("end"))

        txn_type = None
        if not (type is None or (isinstance(type, str) and not type.strip())):
            txn_type = parse_transaction_type(type)

        try:
            start_dt = parse_range_bound(start)
            end_dt = parse_range_bound(end, end=True)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        return self._populate(
            self.db.list_transactions(start=start_dt, end=end_dt, type=txn_type)
        )

    def _populate(self, transactions: list[TransactionEntity]) -> list[TransactionDetails]:
        """Attach client and good entities, loading each one once."""
        goods: dict[int, Optional[Good]] = {}
        clients: dict = {}
        details = []
        for txn in transactions:
            if txn.client not in clients:
                clients[txn.client] = self.resolver.get_client(txn.client)
            items = []
            for item in txn.items:
                if item.good_id not in goods:
                    goods[item.good_id] = self.db.get_good(item.good_id)
                items.append(ItemDetails(item=item, good=goods[item.good_id]))
            details.append(
                TransactionDetails(
                    transaction=txn, client=clients[txn.client], items=tuple(items)
                )
            )
        return details
