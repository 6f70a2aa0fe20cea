"""Resolution of transaction counterparts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from tradeledger.domain.entities import (
    Acquirer,
    AcquirerRef,
    ClientKind,
    ClientRef,
    Supplier,
    SupplierRef,
    TransactionType,
)
from tradeledger.domain.errors import (
    ClientNotFound,
    InvalidTransactionType,
    MissingParameter,
    client_not_found,
    invalid_transaction_type,
    missing_parameter,
)

if TYPE_CHECKING:
    from tradeledger.database.base import Database


def parse_transaction_type(value: Union[str, TransactionType, None]) -> TransactionType:
    """Convert ``value`` to a TransactionType.

    Raises:
        InvalidTransactionType: If value is missing or not purchase/sale
    """
    if isinstance(value, TransactionType):
        return value
    if isinstance(value, str):
        try:
            return TransactionType(value.strip().lower())
        except ValueError:
            pass
    raise InvalidTransactionType(invalid_transaction_type(value))


class ClientResolver:
    """Maps a transaction type and client name to a client reference.

    Purchases are made by acquirers, sales by suppliers. Resolution never
    writes to the store.
    """

    def __init__(self, db: Database):
        self.db = db

    def resolve(
        self, type: Union[str, TransactionType, None], client_name: Optional[str]
    ) -> ClientRef:
        """Resolve the counterpart of a transaction.

        The type is checked before any lookup takes place.

        Args:
            type: "purchase" or "sale"
            client_name: Name of the acquirer (purchase) or supplier (sale)

        Returns:
            Reference to the resolved client

        Raises:
            InvalidTransactionType: If type is missing or unknown
            MissingParameter: If client_name is blank
            ClientNotFound: If the implied collection has no such client
        """
        txn_type = parse_transaction_type(type)
        name = (client_name or "").strip()
        if not name:
            raise MissingParameter(missing_parameter("client_name"))

        if txn_type.client_kind is ClientKind.ACQUIRER:
            acquirer = self.db.get_acquirer_by_name(name)
            if acquirer is None:
                raise ClientNotFound(client_not_found(name, "acquirer"))
            return AcquirerRef(id=acquirer.id)

        supplier = self.db.get_supplier_by_name(name)
        if supplier is None:
            raise ClientNotFound(client_not_found(name, "supplier"))
        return SupplierRef(id=supplier.id)

    def find_by_name(self, client_name: str) -> list[ClientRef]:
        """Find every client with this name, acquirers first."""
        refs: list[ClientRef] = []
        acquirer = self.db.get_acquirer_by_name(client_name)
        if acquirer is not None:
            refs.append(AcquirerRef(id=acquirer.id))
        supplier = self.db.get_supplier_by_name(client_name)
        if supplier is not None:
            refs.append(SupplierRef(id=supplier.id))
        return refs

    def get_client(self, ref: ClientRef) -> Optional[Union[Acquirer, Supplier]]:
        """Load the client entity a reference points to."""
        if isinstance(ref, AcquirerRef):
            return self.db.get_acquirer(ref.id)
        return self.db.get_supplier(ref.id)
