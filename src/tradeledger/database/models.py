"""SQLAlchemy models for tradeledger database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    Boolean,
    JSON,
    CheckConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Good(Base):
    """Tradable good model."""

    __tablename__ = "goods"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, default="", nullable=False)
    material = Column(String, nullable=False)
    weight = Column(Numeric(8, 3), nullable=False)
    value = Column(Numeric(10, 2), default=0, nullable=False)
    stock = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    # Stock can never be persisted below zero, whatever the write path
    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_goods_stock_non_negative"),
        CheckConstraint("value >= 0", name="ck_goods_value_non_negative"),
        CheckConstraint("id >= 1", name="ck_goods_id_positive"),
    )


class Acquirer(Base):
    """Acquirer (buying client) model."""

    __tablename__ = "acquirers"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    type = Column(String, nullable=False)
    experience = Column(Integer, default=0, nullable=False)
    preferred_weapon = Column(String, default="", nullable=False)
    coins = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    email = Column(String, default="", nullable=False)
    monster_specialties = Column(JSON, default=list, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("experience BETWEEN 0 AND 100", name="ck_acquirers_experience_range"),
        CheckConstraint("coins >= 0", name="ck_acquirers_coins_non_negative"),
    )


class Supplier(Base):
    """Supplier (selling client) model."""

    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    location = Column(String, default="", nullable=False)
    specialty = Column(String, nullable=False)
    is_traveling = Column(Boolean, default=False, nullable=False)
    inventory_size = Column(Integer, default=1, nullable=False)
    reputation = Column(Integer, default=0, nullable=False)
    contact = Column(String, default="", nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint(
            "inventory_size BETWEEN 1 AND 100", name="ck_suppliers_inventory_size_range"
        ),
        CheckConstraint("reputation BETWEEN 0 AND 10", name="ck_suppliers_reputation_range"),
    )


class Transaction(Base):
    """Transaction model.

    ``client_id`` points into ``acquirers`` or ``suppliers`` depending on
    ``client_kind``.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    type = Column(String, nullable=False)
    date = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False, index=True)
    client_kind = Column(String, nullable=False)
    client_id = Column(Integer, nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False)
    stock_applied = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("type IN ('purchase', 'sale')", name="ck_transactions_type"),
        CheckConstraint(
            "client_kind IN ('acquirer', 'supplier')", name="ck_transactions_client_kind"
        ),
        CheckConstraint("total_amount >= 0", name="ck_transactions_total_non_negative"),
    )

    # Relationships
    items = relationship(
        "TransactionItem",
        back_populates="transaction",
        cascade="all, delete-orphan",
        order_by="TransactionItem.position",
    )


class TransactionItem(Base):
    """Line item of a transaction.

    ``good_id`` is a plain column, not a foreign key: an item must survive
    the deletion of the good it names so the transaction can still be
    reversed or reported.
    """

    __tablename__ = "transaction_items"

    id = Column(Integer, primary_key=True)
    transaction_id = Column(Integer, ForeignKey("transactions.id"), nullable=False)
    position = Column(Integer, nullable=False)
    good_id = Column(Integer, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    price_at_transaction = Column(Numeric(10, 2), nullable=False)

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_items_quantity_positive"),
        CheckConstraint("price_at_transaction >= 0", name="ck_items_price_non_negative"),
    )

    # Relationships
    transaction = relationship("Transaction", back_populates="items")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
