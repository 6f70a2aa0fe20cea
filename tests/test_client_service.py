"""Tests for acquirer and supplier services."""

import pytest

from tradeledger.domain.entities import AcquirerType, ItemRequest, SupplierSpecialty
from tradeledger.domain.errors import (
    ClientNotFound,
    ConflictError,
    DependencyError,
    ValidationError,
)


class TestAcquirerService:
    """Tests for AcquirerService."""

    def test_create_acquirer(self, acquirer_service):
        acquirer_id = acquirer_service.create_acquirer("  Geralt  ")
        acquirer = acquirer_service.get_acquirer(acquirer_id)
        assert acquirer.name == "Geralt"
        assert acquirer_service.get_acquirer_by_name("Geralt").id == acquirer_id

    def test_create_duplicate(self, acquirer_service, geralt):
        with pytest.raises(ConflictError):
            acquirer_service.create_acquirer("Geralt")

    def test_name_too_short(self, acquirer_service):
        with pytest.raises(ValidationError):
            acquirer_service.create_acquirer("Al")

    def test_list_acquirers_sorted_by_name(self, acquirer_service):
        acquirer_service.create_acquirer("Yennefer")
        acquirer_service.create_acquirer("Dandelion")
        assert [a.name for a in acquirer_service.list_acquirers()] == ["Dandelion", "Yennefer"]

    def test_delete_acquirer(self, acquirer_service, geralt):
        acquirer_service.delete_acquirer("Geralt")
        assert acquirer_service.get_acquirer_by_name("Geralt") is None

    def test_delete_missing(self, acquirer_service):
        with pytest.raises(ClientNotFound, match="Acquirer 'Nobody' not found"):
            acquirer_service.delete_acquirer("Nobody")

    def test_delete_with_transactions_is_blocked(
        self, acquirer_service, transaction_service, geralt, silver_sword
    ):
        transaction_service.create_transaction(
            "purchase", "Geralt", [ItemRequest(good_name="Silver Sword", quantity=1)]
        )
        with pytest.raises(DependencyError, match="1 transaction"):
            acquirer_service.delete_acquirer("Geralt")
        assert acquirer_service.get_acquirer_by_name("Geralt") is not None

    def test_create_with_profile(self, acquirer_service):
        acquirer_id = acquirer_service.create_acquirer(
            "Geralt",
            type="witcher",
            experience=90,
            preferred_weapon=" Silver sword ",
            coins=120,
            email="geralt@kaermorhen.com",
            monster_specialties=["Griffin", " ", "Leshen "],
        )
        acquirer = acquirer_service.get_acquirer(acquirer_id)
        assert acquirer.type is AcquirerType.WITCHER
        assert acquirer.experience == 90
        assert acquirer.preferred_weapon == "Silver sword"
        assert acquirer.coins == 120
        assert acquirer.is_active is True
        assert acquirer.email == "geralt@kaermorhen.com"
        assert acquirer.monster_specialties == ("Griffin", "Leshen")

    def test_defaults(self, acquirer_service, geralt):
        acquirer = acquirer_service.get_acquirer(geralt.id)
        assert acquirer.type is AcquirerType.VILLAGER
        assert acquirer.experience == 0
        assert acquirer.coins == 0
        assert acquirer.email == ""
        assert acquirer.monster_specialties == ()

    @pytest.mark.parametrize(
        "field,value",
        [
            ("type", "sorcerer"),
            ("experience", 101),
            ("experience", -1),
            ("experience", "10"),
            ("coins", -5),
            ("email", "not-an-email"),
        ],
    )
    def test_invalid_profile_field(self, acquirer_service, field, value):
        with pytest.raises(ValidationError):
            acquirer_service.create_acquirer("Geralt", **{field: value})
        assert acquirer_service.get_acquirer_by_name("Geralt") is None

    def test_update_acquirer(self, acquirer_service, geralt):
        acquirer_service.update_acquirer(
            geralt.id, name="Geralt of Rivia", coins=300, is_active=False, monster_specialties=["Striga"]
        )
        acquirer = acquirer_service.get_acquirer(geralt.id)
        assert acquirer.name == "Geralt of Rivia"
        assert acquirer.coins == 300
        assert acquirer.is_active is False
        assert acquirer.monster_specialties == ("Striga",)
        assert acquirer.type is AcquirerType.VILLAGER

    def test_update_keeps_own_name(self, acquirer_service, geralt):
        acquirer_service.update_acquirer(geralt.id, name="Geralt", experience=5)
        assert acquirer_service.get_acquirer(geralt.id).experience == 5

    def test_update_name_clash_is_refused(self, acquirer_service, geralt):
        acquirer_service.create_acquirer("Yennefer")
        with pytest.raises(ConflictError, match="Yennefer"):
            acquirer_service.update_acquirer(geralt.id, name="Yennefer", coins=10)
        acquirer = acquirer_service.get_acquirer(geralt.id)
        assert acquirer.name == "Geralt"
        assert acquirer.coins == 0

    def test_update_invalid_field(self, acquirer_service, geralt):
        with pytest.raises(ValidationError):
            acquirer_service.update_acquirer(geralt.id, experience=150)
        assert acquirer_service.get_acquirer(geralt.id).experience == 0

    def test_update_missing(self, acquirer_service):
        with pytest.raises(ClientNotFound):
            acquirer_service.update_acquirer(99, coins=1)


class TestSupplierService:
    """Tests for SupplierService."""

    def test_create_supplier(self, supplier_service):
        supplier_id = supplier_service.create_supplier("Zoltan")
        assert supplier_service.get_supplier(supplier_id).name == "Zoltan"

    def test_same_name_as_acquirer_is_allowed(self, supplier_service, geralt):
        supplier_id = supplier_service.create_supplier("Geralt")
        assert supplier_service.get_supplier(supplier_id).name == "Geralt"

    def test_create_duplicate(self, supplier_service, zoltan):
        with pytest.raises(ConflictError):
            supplier_service.create_supplier("Zoltan")

    def test_list_suppliers(self, supplier_service, zoltan):
        assert [s.name for s in supplier_service.list_suppliers()] == ["Zoltan"]
        assert supplier_service.list_suppliers(name="Other") == []

    def test_delete_supplier(self, supplier_service, zoltan):
        supplier_service.delete_supplier("Zoltan")
        assert supplier_service.list_suppliers() == []

    def test_delete_missing(self, supplier_service):
        with pytest.raises(ClientNotFound):
            supplier_service.delete_supplier("Nobody")

    def test_delete_with_transactions_is_blocked(
        self, supplier_service, transaction_service, zoltan, silver_sword
    ):
        transaction_service.create_transaction(
            "sale", "Zoltan", [ItemRequest(good_name="Silver Sword", quantity=2)]
        )
        with pytest.raises(DependencyError):
            supplier_service.delete_supplier("Zoltan")

    def test_create_with_profile(self, supplier_service):
        supplier_id = supplier_service.create_supplier(
            "Zoltan",
            specialty="blacksmith",
            location=" Novigrad ",
            is_traveling=True,
            inventory_size=40,
            reputation=7,
            contact="zoltan@mahakam.com",
        )
        supplier = supplier_service.get_supplier(supplier_id)
        assert supplier.specialty is SupplierSpecialty.BLACKSMITH
        assert supplier.location == "Novigrad"
        assert supplier.is_traveling is True
        assert supplier.inventory_size == 40
        assert supplier.reputation == 7
        assert supplier.contact == "zoltan@mahakam.com"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("specialty", "jeweller"),
            ("inventory_size", 0),
            ("inventory_size", 101),
            ("reputation", 11),
            ("contact", "zoltan at mahakam"),
        ],
    )
    def test_invalid_profile_field(self, supplier_service, field, value):
        with pytest.raises(ValidationError):
            supplier_service.create_supplier("Zoltan", **{field: value})

    def test_update_supplier(self, supplier_service, zoltan):
        supplier_service.update_supplier(zoltan.id, location="Vizima", reputation=9, is_traveling=True)
        supplier = supplier_service.get_supplier(zoltan.id)
        assert supplier.location == "Vizima"
        assert supplier.reputation == 9
        assert supplier.is_traveling is True
        assert supplier.specialty is SupplierSpecialty.PEDDLER

    def test_update_name_clash_is_refused(self, supplier_service, zoltan):
        supplier_service.create_supplier("Dandelion")
        with pytest.raises(ConflictError):
            supplier_service.update_supplier(zoltan.id, name="Dandelion")
        assert supplier_service.get_supplier(zoltan.id).name == "Zoltan"

    def test_update_missing(self, supplier_service):
        with pytest.raises(ClientNotFound):
            supplier_service.update_supplier(99, reputation=1)
