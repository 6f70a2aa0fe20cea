"""Domain model entities for tradeledger.

These are pure data classes representing business concepts, independent of
database schema. The transaction engine and query layer only ever see these
types; the ORM models stay behind the database layer.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Optional, Union


class TransactionType(str, Enum):
    """Direction of a transaction relative to the shop's stock."""

    PURCHASE = "purchase"
    SALE = "sale"

    @property
    def client_kind(self) -> "ClientKind":
        """Counterpart category implied by this transaction type."""
        if self is TransactionType.PURCHASE:
            return ClientKind.ACQUIRER
        return ClientKind.SUPPLIER

    def stock_delta(self, quantity: int) -> int:
        """Signed stock change for ``quantity`` units of this type."""
        return -quantity if self is TransactionType.PURCHASE else quantity


class ClientKind(str, Enum):
    """Counterpart collections a transaction can reference."""

    ACQUIRER = "acquirer"
    SUPPLIER = "supplier"


class Material(str, Enum):
    """Materials a good can be made of."""

    WOOD = "wood"
    STEEL = "steel"
    PLASTIC = "plastic"
    ALUMINIUM = "aluminium"
    GLASS = "glass"


class AcquirerType(str, Enum):
    """Walks of life an acquirer can come from."""

    WITCHER = "witcher"
    KNIGHT = "knight"
    NOBLE = "noble"
    BANDIT = "bandit"
    MERCENARY = "mercenary"
    VILLAGER = "villager"


class SupplierSpecialty(str, Enum):
    """Trades a supplier can practise."""

    BLACKSMITH = "blacksmith"
    ALCHEMIST = "alchemist"
    PEDDLER = "peddler"
    ARMORER = "armorer"
    TAILOR = "tailor"


@dataclass(frozen=True)
class Good:
    """Tradable good domain entity."""

    id: int
    name: str
    description: str
    material: Material
    weight: Decimal
    value: Decimal
    stock: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Acquirer:
    """Client that buys goods from the shop."""

    id: int
    name: str
    type: AcquirerType
    experience: int
    preferred_weapon: str
    coins: int
    is_active: bool
    email: str
    monster_specialties: tuple[str, ...]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Supplier:
    """Client that sells goods to the shop."""

    id: int
    name: str
    location: str
    specialty: SupplierSpecialty
    is_traveling: bool
    inventory_size: int
    reputation: int
    contact: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class AcquirerRef:
    """Reference to an acquirer counterpart."""

    id: int
    kind: ClassVar[ClientKind] = ClientKind.ACQUIRER


@dataclass(frozen=True)
class SupplierRef:
    """Reference to a supplier counterpart."""

    id: int
    kind: ClassVar[ClientKind] = ClientKind.SUPPLIER


ClientRef = Union[AcquirerRef, SupplierRef]


def client_ref(kind: ClientKind, client_id: int) -> ClientRef:
    """Build the reference variant matching ``kind``."""
    if ClientKind(kind) is ClientKind.ACQUIRER:
        return AcquirerRef(id=client_id)
    return SupplierRef(id=client_id)


@dataclass(frozen=True)
class TransactionItem:
    """Line item embedded in a transaction.

    ``price_at_transaction`` is the good's value when the transaction was
    committed and never follows later price changes.
    """

    good_id: int
    quantity: int
    price_at_transaction: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.price_at_transaction * self.quantity


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    type: TransactionType
    date: datetime
    client: ClientRef
    items: tuple[TransactionItem, ...]
    total_amount: Decimal
    stock_applied: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ItemRequest:
    """Requested line item, naming the good to trade."""

    good_name: str
    quantity: int


@dataclass(frozen=True)
class StockMutation:
    """Pending change to one good's stock."""

    good_id: int
    delta: int


@dataclass(frozen=True)
class ItemDetails:
    """Line item together with its good, if the good still exists."""

    item: TransactionItem
    good: Optional[Good]


@dataclass(frozen=True)
class TransactionDetails:
    """Transaction with its client and goods populated."""

    transaction: Transaction
    client: Optional[Union[Acquirer, Supplier]]
    items: tuple[ItemDetails, ...]
