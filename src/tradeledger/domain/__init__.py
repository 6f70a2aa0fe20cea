"""Domain layer for tradeledger application."""

from tradeledger.domain.transaction import TransactionService
from tradeledger.domain.transaction_query import TransactionQueryService
from tradeledger.domain.client_resolver import ClientResolver
from tradeledger.domain.client import AcquirerService, SupplierService
from tradeledger.domain.good import GoodService

__all__ = [
    "TransactionService",
    "TransactionQueryService",
    "ClientResolver",
    "AcquirerService",
    "SupplierService",
    "GoodService",
]
