"""Good domain service."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Optional
from tradeledger.domain.entities import Good as GoodEntity, Material
from tradeledger.domain.errors import (
    ConflictError,
    GoodNotFound,
    ValidationError,
    good_not_found,
)

if TYPE_CHECKING:
    from tradeledger.database.base import Database

MIN_NAME_LENGTH = 3
MAX_DESCRIPTION_LENGTH = 200
MAX_WEIGHT = Decimal("1000")
VALUE_PLACES = 2
WEIGHT_PLACES = 3


def _to_decimal(value: object, field: str, places: int) -> Decimal:
    """Parse ``value`` as a finite Decimal with at most ``places`` decimals."""
    if isinstance(value, bool):
        raise ValidationError(f"Good {field} must be a number")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(f"Good {field} must be a number, got '{value}'") from e
    if not result.is_finite():
        raise ValidationError(f"Good {field} must be a number, got '{value}'")
    if result.as_tuple().exponent < -places:
        raise ValidationError(
            f"Good {field} ({value}) cannot have more than {places} decimal places"
        )
    return result


def validate_name(name: str) -> str:
    """Return the trimmed good name or raise ValidationError."""
    name = (name or "").strip()
    if len(name) < MIN_NAME_LENGTH:
        raise ValidationError(f"Good name must have at least {MIN_NAME_LENGTH} characters")
    if not all(ch.isalnum() or ch == " " for ch in name):
        raise ValidationError(f"Good name '{name}' may only contain letters, digits and spaces")
    return name


def validate_material(material: str | Material) -> Material:
    """Return the Material for ``material`` or raise ValidationError."""
    try:
        return Material(material)
    except ValueError as e:
        allowed = ", ".join(m.value for m in Material)
        raise ValidationError(f"'{material}' is not an allowed material ({allowed})") from e


def validate_weight(weight: object) -> Decimal:
    """Return the weight as Decimal; it must be strictly between 0 and 1000."""
    value = _to_decimal(weight, "weight", WEIGHT_PLACES)
    if not Decimal(0) < value < MAX_WEIGHT:
        raise ValidationError(f"Good weight ({value}) must be between 0 and {MAX_WEIGHT}")
    return value


def validate_value(value: object) -> Decimal:
    """Return the monetary value as Decimal; it cannot be negative and has at most two decimals."""
    amount = _to_decimal(value, "value", VALUE_PLACES)
    if amount < 0:
        raise ValidationError("Good value cannot be negative")
    return amount


def validate_description(description: Optional[str]) -> str:
    description = (description or "").strip()
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Good description cannot exceed {MAX_DESCRIPTION_LENGTH} characters"
        )
    return description


class GoodService:
    """Service for managing goods.

    Stock is set once at creation. Afterwards only the transaction engine
    changes it, so ``update_good`` has no stock parameter.
    """

    def __init__(self, db: Database):
        """Initialize good service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_good(
        self,
        good_id: int,
        name: str,
        material: str | Material,
        weight: Decimal | int | float | str,
        value: Decimal | int | float | str = Decimal("0"),
        stock: int = 0,
        description: Optional[str] = None,
    ) -> int:
        """Create a good.

        Args:
            good_id: Unique positive identifier chosen by the caller
            name: Unique good name
            material: One of the Material values
            weight: Weight, strictly between 0 and 1000
            value: Monetary value, not negative, at most two decimals
            stock: Initial stock, not negative
            description: Optional description (max 200 characters)

        Returns:
            Good ID

        Raises:
            ValidationError: If a field is invalid
            ConflictError: If the ID or name is already taken, or the ID is still
                referenced by transactions of a deleted good
        """
        if isinstance(good_id, bool) or not isinstance(good_id, int) or good_id < 1:
            raise ValidationError("Good id must be a positive integer")
        if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
            raise ValidationError("Good stock must be a non-negative integer")
        name = validate_name(name)

        if self.db.get_good(good_id) is not None:
            raise ConflictError(f"Good with id {good_id} already exists")
        if self.db.get_good_by_name(name) is not None:
            raise ConflictError(f"Good with name '{name}' already exists")
        referencing = self.db.count_good_transaction_items(good_id)
        if referencing > 0:
            raise ConflictError(
                f"Good id {good_id} belonged to a deleted good and is still referenced by "
                f"{referencing} transaction item(s); choose another id"
            )

        return self.db.create_good(
            good_id=good_id,
            name=name,
            material=validate_material(material),
            weight=validate_weight(weight),
            value=validate_value(value),
            stock=stock,
            description=validate_description(description),
        )

    def get_good(self, good_id: int) -> Optional[GoodEntity]:
        """Get good by ID.

        Args:
            good_id: Good ID

        Returns:
            Good entity or None if not found
        """
        return self.db.get_good(good_id)

    def get_good_by_name(self, name: str) -> Optional[GoodEntity]:
        """Get good by name."""
        return self.db.get_good_by_name(name)

    def require_good(self, good_id: int) -> GoodEntity:
        """Get good by ID or raise GoodNotFound."""
        good = self.db.get_good(good_id)
        if good is None:
            raise GoodNotFound(good_not_found(good_id))
        return good

    def list_goods(self, name: Optional[str] = None) -> list[GoodEntity]:
        """List goods ordered by ID, optionally filtered by exact name."""
        return self.db.list_goods(name=name)

    def update_good(
        self,
        good_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        material: Optional[str | Material] = None,
        weight: Optional[Decimal | int | float | str] = None,
        value: Optional[Decimal | int | float | str] = None,
    ) -> None:
        """Update descriptive fields of a good.

        Changing the value never affects the price snapshots stored on
        existing transactions.

        Raises:
            GoodNotFound: If the good doesn't exist
            ValidationError: If a field is invalid
            ConflictError: If the new name is already taken
        """
        self.require_good(good_id)

        self.db.update_good(
            good_id=good_id,
            name=validate_name(name) if name is not None else None,
            description=validate_description(description) if description is not None else None,
            material=validate_material(material) if material is not None else None,
            weight=validate_weight(weight) if weight is not None else None,
            value=validate_value(value) if value is not None else None,
        )

    def delete_good(self, good_id: int) -> None:
        """Delete a good.

        Transactions referencing the good are kept; their items still carry
        the good ID, quantity and price snapshot.

        Raises:
            GoodNotFound: If the good doesn't exist
        """
        self.require_good(good_id)
        self.db.delete_good(good_id)
