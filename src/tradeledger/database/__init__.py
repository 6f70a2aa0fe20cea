"""Database layer for tradeledger application."""

from tradeledger.database.base import Database
from tradeledger.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
