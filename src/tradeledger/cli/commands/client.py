"""Acquirer and supplier management commands."""

import click
from tradeledger.cli.error_handling import handle_domain_error
from tradeledger.domain.client import AcquirerService, SupplierService
from tradeledger.domain.entities import AcquirerType, SupplierSpecialty
from tradeledger.domain.errors import DomainError

ACQUIRER_TYPES = [t.value for t in AcquirerType]
SUPPLIER_SPECIALTIES = [s.value for s in SupplierSpecialty]


def _echo_clients(clients, label: str, describe) -> None:
    if not clients:
        click.echo(f"No {label}s found.")
        return

    click.echo(f"\n{label.capitalize()}s:")
    click.echo("-" * 60)
    for c in clients:
        click.echo(f"ID: {c.id:3d} | {c.name:20s} | {describe(c)}")


@click.group()
def acquirer_group():
    """Manage acquirers (clients that purchase goods)."""
    pass


@acquirer_group.command("add")
@click.argument("name", metavar="ACQUIRER_NAME")
@click.option("--type", "acquirer_type", type=click.Choice(ACQUIRER_TYPES), default=AcquirerType.VILLAGER.value, show_default=True, help="Acquirer type")
@click.option("--experience", type=int, default=0, show_default=True, help="Experience (0 to 100)")
@click.option("--weapon", help="Preferred weapon")
@click.option("--coins", type=int, default=0, show_default=True, help="Coins carried")
@click.option("--inactive", is_flag=True, help="Register the acquirer as inactive")
@click.option("--email", help="Email address")
@click.option("--monster", "monsters", multiple=True, help="Monster specialty (repeatable)")
@click.pass_context
def add_acquirer(
    ctx,
    name: str,
    acquirer_type: str,
    experience: int,
    weapon: str | None,
    coins: int,
    inactive: bool,
    email: str | None,
    monsters: tuple[str, ...],
):
    """Add an acquirer.

    Examples:
        tradeledger acquirer add "Geralt"
        tradeledger acquirer add "Geralt" --type witcher --experience 90 --monster Griffin
    """
    service = AcquirerService(ctx.obj["db"])
    try:
        acquirer_id = service.create_acquirer(
            name,
            type=acquirer_type,
            experience=experience,
            preferred_weapon=weapon,
            coins=coins,
            is_active=not inactive,
            email=email,
            monster_specialties=monsters,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created acquirer '{name}' (ID: {acquirer_id})")


@acquirer_group.command("list")
@click.pass_context
def list_acquirers(ctx):
    """List all acquirers."""
    service = AcquirerService(ctx.obj["db"])
    _echo_clients(
        service.list_acquirers(),
        "acquirer",
        lambda a: f"{a.type.value:10s} | {'active' if a.is_active else 'inactive'}",
    )


@acquirer_group.command("show")
@click.argument("name", metavar="ACQUIRER_NAME")
@click.pass_context
def show_acquirer(ctx, name: str):
    """Show all fields of an acquirer."""
    service = AcquirerService(ctx.obj["db"])
    try:
        a = service.require_acquirer(name)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Acquirer ID: {a.id}")
    click.echo(f"  Name: {a.name}")
    click.echo(f"  Type: {a.type.value}")
    click.echo(f"  Experience: {a.experience}")
    if a.preferred_weapon:
        click.echo(f"  Preferred weapon: {a.preferred_weapon}")
    click.echo(f"  Coins: {a.coins}")
    click.echo(f"  Active: {'yes' if a.is_active else 'no'}")
    if a.email:
        click.echo(f"  Email: {a.email}")
    if a.monster_specialties:
        click.echo(f"  Monster specialties: {', '.join(a.monster_specialties)}")


@acquirer_group.command("update")
@click.argument("name", metavar="ACQUIRER_NAME")
@click.option("--name", "new_name", help="New name")
@click.option("--type", "acquirer_type", type=click.Choice(ACQUIRER_TYPES), help="New type")
@click.option("--experience", type=int, help="New experience (0 to 100)")
@click.option("--weapon", help="New preferred weapon")
@click.option("--coins", type=int, help="New coin count")
@click.option("--active/--inactive", default=None, help="Mark the acquirer active or inactive")
@click.option("--email", help="New email address")
@click.option("--monster", "monsters", multiple=True, help="Replace the monster specialties (repeatable)")
@click.pass_context
def update_acquirer(
    ctx,
    name: str,
    new_name: str | None,
    acquirer_type: str | None,
    experience: int | None,
    weapon: str | None,
    coins: int | None,
    active: bool | None,
    email: str | None,
    monsters: tuple[str, ...],
):
    """Update an acquirer.

    Examples:
        tradeledger acquirer update "Geralt" --coins 120
        tradeledger acquirer update "Geralt" --name "Geralt of Rivia"
    """
    service = AcquirerService(ctx.obj["db"])
    try:
        acquirer = service.require_acquirer(name)
        service.update_acquirer(
            acquirer.id,
            name=new_name,
            type=acquirer_type,
            experience=experience,
            preferred_weapon=weapon,
            coins=coins,
            is_active=active,
            email=email,
            monster_specialties=monsters or None,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated acquirer '{new_name or name}'")


@acquirer_group.command("delete")
@click.argument("name", metavar="ACQUIRER_NAME")
@click.pass_context
def delete_acquirer(ctx, name: str):
    """Delete an acquirer that has no transactions."""
    service = AcquirerService(ctx.obj["db"])
    try:
        service.delete_acquirer(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted acquirer '{name}'")


@click.group()
def supplier_group():
    """Manage suppliers (clients that sell goods to the shop)."""
    pass


@supplier_group.command("add")
@click.argument("name", metavar="SUPPLIER_NAME")
@click.option("--specialty", type=click.Choice(SUPPLIER_SPECIALTIES), default=SupplierSpecialty.PEDDLER.value, show_default=True, help="Trade")
@click.option("--location", help="Where the supplier trades")
@click.option("--traveling", is_flag=True, help="The supplier is on the road")
@click.option("--inventory-size", type=int, default=1, show_default=True, help="Inventory size (1 to 100)")
@click.option("--reputation", type=int, default=0, show_default=True, help="Reputation (0 to 10)")
@click.option("--contact", help="Contact email address")
@click.pass_context
def add_supplier(
    ctx,
    name: str,
    specialty: str,
    location: str | None,
    traveling: bool,
    inventory_size: int,
    reputation: int,
    contact: str | None,
):
    """Add a supplier.

    Examples:
        tradeledger supplier add "Zoltan"
        tradeledger supplier add "Zoltan" --specialty blacksmith --location Novigrad
    """
    service = SupplierService(ctx.obj["db"])
    try:
        supplier_id = service.create_supplier(
            name,
            specialty=specialty,
            location=location,
            is_traveling=traveling,
            inventory_size=inventory_size,
            reputation=reputation,
            contact=contact,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created supplier '{name}' (ID: {supplier_id})")


@supplier_group.command("list")
@click.pass_context
def list_suppliers(ctx):
    """List all suppliers."""
    service = SupplierService(ctx.obj["db"])
    _echo_clients(
        service.list_suppliers(),
        "supplier",
        lambda s: f"{s.specialty.value:10s} | {s.location or '-'}",
    )


@supplier_group.command("show")
@click.argument("name", metavar="SUPPLIER_NAME")
@click.pass_context
def show_supplier(ctx, name: str):
    """Show all fields of a supplier."""
    service = SupplierService(ctx.obj["db"])
    try:
        s = service.require_supplier(name)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Supplier ID: {s.id}")
    click.echo(f"  Name: {s.name}")
    click.echo(f"  Specialty: {s.specialty.value}")
    if s.location:
        click.echo(f"  Location: {s.location}")
    click.echo(f"  Traveling: {'yes' if s.is_traveling else 'no'}")
    click.echo(f"  Inventory size: {s.inventory_size}")
    click.echo(f"  Reputation: {s.reputation}")
    if s.contact:
        click.echo(f"  Contact: {s.contact}")


@supplier_group.command("update")
@click.argument("name", metavar="SUPPLIER_NAME")
@click.option("--name", "new_name", help="New name")
@click.option("--specialty", type=click.Choice(SUPPLIER_SPECIALTIES), help="New trade")
@click.option("--location", help="New location")
@click.option("--traveling/--settled", default=None, help="Mark the supplier traveling or settled")
@click.option("--inventory-size", type=int, help="New inventory size (1 to 100)")
@click.option("--reputation", type=int, help="New reputation (0 to 10)")
@click.option("--contact", help="New contact email address")
@click.pass_context
def update_supplier(
    ctx,
    name: str,
    new_name: str | None,
    specialty: str | None,
    location: str | None,
    traveling: bool | None,
    inventory_size: int | None,
    reputation: int | None,
    contact: str | None,
):
    """Update a supplier.

    Examples:
        tradeledger supplier update "Zoltan" --reputation 8
    """
    service = SupplierService(ctx.obj["db"])
    try:
        supplier = service.require_supplier(name)
        service.update_supplier(
            supplier.id,
            name=new_name,
            specialty=specialty,
            location=location,
            is_traveling=traveling,
            inventory_size=inventory_size,
            reputation=reputation,
            contact=contact,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated supplier '{new_name or name}'")


@supplier_group.command("delete")
@click.argument("name", metavar="SUPPLIER_NAME")
@click.pass_context
def delete_supplier(ctx, name: str):
    """Delete a supplier that has no transactions."""
    service = SupplierService(ctx.obj["db"])
    try:
        service.delete_supplier(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted supplier '{name}'")


def register_commands(cli: click.Group) -> None:
    """Register acquirer and supplier commands with main CLI."""
    cli.add_command(acquirer_group, name="acquirer")
    cli.add_command(supplier_group, name="supplier")
