"""Acquirer and supplier domain services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence
from email_validator import EmailNotValidError, validate_email
from tradeledger.domain.entities import (
    Acquirer as AcquirerEntity,
    AcquirerRef,
    AcquirerType,
    Supplier as SupplierEntity,
    SupplierRef,
    SupplierSpecialty,
)
from tradeledger.domain.errors import (
    ClientNotFound,
    ConflictError,
    DependencyError,
    ValidationError,
    client_delete_blocked,
    client_not_found,
)

if TYPE_CHECKING:
    from tradeledger.database.base import Database

MIN_NAME_LENGTH = 3
MAX_EXPERIENCE = 100
MAX_INVENTORY_SIZE = 100
MAX_REPUTATION = 10


def validate_client_name(name: str) -> str:
    """Return the trimmed client name or raise ValidationError."""
    name = (name or "").strip()
    if len(name) < MIN_NAME_LENGTH:
        raise ValidationError(f"Client name must have at least {MIN_NAME_LENGTH} characters")
    if not all(ch.isalnum() or ch == " " for ch in name):
        raise ValidationError(f"Client name '{name}' may only contain letters, digits and spaces")
    return name


def validate_email_address(value: Optional[str], field: str = "email") -> str:
    """Return the normalized address, or "" when none is given."""
    value = (value or "").strip()
    if not value:
        return ""
    try:
        return validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError as e:
        raise ValidationError(f"'{value}' is not a valid {field}: {e}") from e


def _validate_int(value: object, field: str, minimum: int, maximum: Optional[int] = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer")
    if value < minimum or (maximum is not None and value > maximum):
        bounds = f"between {minimum} and {maximum}" if maximum is not None else f"at least {minimum}"
        raise ValidationError(f"{field} must be {bounds}, got {value}")
    return value


def _validate_choice(value, enum_type, field: str):
    try:
        return enum_type(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_type)
        raise ValidationError(f"'{value}' is not an allowed {field} ({allowed})") from e


def validate_monster_specialties(specialties: Sequence[str]) -> tuple[str, ...]:
    """Return trimmed, non-empty specialties in their given order."""
    if isinstance(specialties, str):
        specialties = [specialties]
    cleaned = tuple(s.strip() for s in specialties if s and s.strip())
    return cleaned


class AcquirerService:
    """Service for managing acquirers (clients that purchase goods)."""

    def __init__(self, db: Database):
        self.db = db

    def create_acquirer(
        self,
        name: str,
        type: str | AcquirerType = AcquirerType.VILLAGER,
        experience: int = 0,
        preferred_weapon: Optional[str] = None,
        coins: int = 0,
        is_active: bool = True,
        email: Optional[str] = None,
        monster_specialties: Sequence[str] = (),
    ) -> int:
        """Create a new acquirer.

        Args:
            name: Unique acquirer name
            type: One of the AcquirerType values
            experience: Experience from 0 to 100
            preferred_weapon: Free text
            coins: Coins carried, not negative
            is_active: Whether the acquirer is currently trading
            email: Optional email address
            monster_specialties: Monsters the acquirer specialises in

        Returns:
            Acquirer ID

        Raises:
            ValidationError: If a field is invalid
            ConflictError: If an acquirer with that name exists
        """
        name = validate_client_name(name)
        if self.db.get_acquirer_by_name(name) is not None:
            raise ConflictError(f"Acquirer with name '{name}' already exists")
        return self.db.create_acquirer(
            name=name,
            type=_validate_choice(type, AcquirerType, "acquirer type"),
            experience=_validate_int(experience, "Experience", 0, MAX_EXPERIENCE),
            preferred_weapon=(preferred_weapon or "").strip(),
            coins=_validate_int(coins, "Coins", 0),
            is_active=bool(is_active),
            email=validate_email_address(email),
            monster_specialties=validate_monster_specialties(monster_specialties),
        )

    def get_acquirer(self, acquirer_id: int) -> Optional[AcquirerEntity]:
        """Get acquirer by ID."""
        return self.db.get_acquirer(acquirer_id)

    def get_acquirer_by_name(self, name: str) -> Optional[AcquirerEntity]:
        """Get acquirer by name."""
        return self.db.get_acquirer_by_name(name)

    def require_acquirer(self, name: str) -> AcquirerEntity:
        """Get acquirer by name or raise ClientNotFound."""
        acquirer = self.db.get_acquirer_by_name(name)
        if acquirer is None:
            raise ClientNotFound(client_not_found(name, "acquirer"))
        return acquirer

    def list_acquirers(self, name: Optional[str] = None) -> list[AcquirerEntity]:
        """List acquirers ordered by name."""
        return self.db.list_acquirers(name=name)

    def update_acquirer(
        self,
        acquirer_id: int,
        name: Optional[str] = None,
        type: Optional[str | AcquirerType] = None,
        experience: Optional[int] = None,
        preferred_weapon: Optional[str] = None,
        coins: Optional[int] = None,
        is_active: Optional[bool] = None,
        email: Optional[str] = None,
        monster_specialties: Optional[Sequence[str]] = None,
    ) -> None:
        """Update an acquirer. Fields left as None are not changed.

        Raises:
            ClientNotFound: If the acquirer doesn't exist
            ValidationError: If a field is invalid
            ConflictError: If the new name belongs to another acquirer
        """
        if self.db.get_acquirer(acquirer_id) is None:
            raise ClientNotFound(f"Acquirer {acquirer_id} not found")

        self.db.update_acquirer(
            acquirer_id=acquirer_id,
            name=validate_client_name(name) if name is not None else None,
            type=_validate_choice(type, AcquirerType, "acquirer type") if type is not None else None,
            experience=(
                _validate_int(experience, "Experience", 0, MAX_EXPERIENCE)
                if experience is not None
                else None
            ),
            preferred_weapon=preferred_weapon.strip() if preferred_weapon is not None else None,
            coins=_validate_int(coins, "Coins", 0) if coins is not None else None,
            is_active=bool(is_active) if is_active is not None else None,
            email=validate_email_address(email) if email is not None else None,
            monster_specialties=(
                validate_monster_specialties(monster_specialties)
                if monster_specialties is not None
                else None
            ),
        )

    def delete_acquirer(self, name: str) -> None:
        """Delete an acquirer by name.

        Raises:
            ClientNotFound: If no acquirer has that name
            DependencyError: If transactions still reference the acquirer
        """
        acquirer = self.require_acquirer(name)

        count = self.db.count_client_transactions(AcquirerRef(id=acquirer.id))
        if count > 0:
            raise DependencyError(client_delete_blocked("acquirer", name, count))

        self.db.delete_acquirer(acquirer.id)


class SupplierService:
    """Service for managing suppliers (clients that sell goods)."""

    def __init__(self, db: Database):
        self.db = db

    def create_supplier(
        self,
        name: str,
        specialty: str | SupplierSpecialty = SupplierSpecialty.PEDDLER,
        location: Optional[str] = None,
        is_traveling: bool = False,
        inventory_size: int = 1,
        reputation: int = 0,
        contact: Optional[str] = None,
    ) -> int:
        """Create a new supplier.

        Args:
            name: Unique supplier name
            specialty: One of the SupplierSpecialty values
            location: Where the supplier usually trades
            is_traveling: Whether the supplier is on the road
            inventory_size: Inventory slots, from 1 to 100
            reputation: Reputation from 0 to 10
            contact: Optional contact email address

        Returns:
            Supplier ID

        Raises:
            ValidationError: If a field is invalid
            ConflictError: If a supplier with that name exists
        """
        name = validate_client_name(name)
        if self.db.get_supplier_by_name(name) is not None:
            raise ConflictError(f"Supplier with name '{name}' already exists")
        return self.db.create_supplier(
            name=name,
            specialty=_validate_choice(specialty, SupplierSpecialty, "supplier specialty"),
            location=(location or "").strip(),
            is_traveling=bool(is_traveling),
            inventory_size=_validate_int(inventory_size, "Inventory size", 1, MAX_INVENTORY_SIZE),
            reputation=_validate_int(reputation, "Reputation", 0, MAX_REPUTATION),
            contact=validate_email_address(contact, "contact"),
        )

    def get_supplier(self, supplier_id: int) -> Optional[SupplierEntity]:
        """Get supplier by ID."""
        return self.db.get_supplier(supplier_id)

    def get_supplier_by_name(self, name: str) -> Optional[SupplierEntity]:
        """Get supplier by name."""
        return self.db.get_supplier_by_name(name)

    def require_supplier(self, name: str) -> SupplierEntity:
        """Get supplier by name or raise ClientNotFound."""
        supplier = self.db.get_supplier_by_name(name)
        if supplier is None:
            raise ClientNotFound(client_not_found(name, "supplier"))
        return supplier

    def list_suppliers(self, name: Optional[str] = None) -> list[SupplierEntity]:
        """List suppliers ordered by name."""
        return self.db.list_suppliers(name=name)

    def update_supplier(
        self,
        supplier_id: int,
        name: Optional[str] = None,
        specialty: Optional[str | SupplierSpecialty] = None,
        location: Optional[str] = None,
        is_traveling: Optional[bool] = None,
        inventory_size: Optional[int] = None,
        reputation: Optional[int] = None,
        contact: Optional[str] = None,
    ) -> None:
        """Update a supplier. Fields left as None are not changed.

        Raises:
            ClientNotFound: If the supplier doesn't exist
            ValidationError: If a field is invalid
            ConflictError: If the new name belongs to another supplier
        """
        if self.db.get_supplier(supplier_id) is None:
            raise ClientNotFound(f"Supplier {supplier_id} not found")

        self.db.update_supplier(
            supplier_id=supplier_id,
            name=validate_client_name(name) if name is not None else None,
            specialty=(
                _validate_choice(specialty, SupplierSpecialty, "supplier specialty")
                if specialty is not None
                else None
            ),
            location=location.strip() if location is not None else None,
            is_traveling=bool(is_traveling) if is_traveling is not None else None,
            inventory_size=(
                _validate_int(inventory_size, "Inventory size", 1, MAX_INVENTORY_SIZE)
                if inventory_size is not None
                else None
            ),
            reputation=(
                _validate_int(reputation, "Reputation", 0, MAX_REPUTATION)
                if reputation is not None
                else None
            ),
            contact=validate_email_address(contact, "contact") if contact is not None else None,
        )

    def delete_supplier(self, name: str) -> None:
        """Delete a supplier by name.

        Raises:
            ClientNotFound: If no supplier has that name
            DependencyError: If transactions still reference the supplier
        """
        supplier = self.require_supplier(name)

        count = self.db.count_client_transactions(SupplierRef(id=supplier.id))
        if count > 0:
            raise DependencyError(client_delete_blocked("supplier", name, count))

        self.db.delete_supplier(supplier.id)
