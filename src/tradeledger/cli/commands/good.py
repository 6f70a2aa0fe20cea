"""Good management commands."""

import click
from tradeledger.cli.error_handling import handle_domain_error
from tradeledger.domain.entities import Material
from tradeledger.domain.errors import DomainError
from tradeledger.domain.good import GoodService

MATERIALS = [m.value for m in Material]


@click.group()
def good_group():
    """Manage goods."""
    pass


@good_group.command("add")
@click.argument("good_id", type=int)
@click.argument("name")
@click.option("--material", required=True, type=click.Choice(MATERIALS), help="Material")
@click.option("--weight", required=True, help="Weight (between 0 and 1000)")
@click.option("--value", default="0", show_default=True, help="Monetary value")
@click.option("--stock", default=0, show_default=True, type=int, help="Initial stock")
@click.option("--description", help="Description (max 200 characters)")
@click.pass_context
def add_good(
    ctx,
    good_id: int,
    name: str,
    material: str,
    weight: str,
    value: str,
    stock: int,
    description: str | None,
):
    """Add a good.

    Examples:
        tradeledger good add 1 "Silver Sword" --material steel --weight 3.5 --value 250 --stock 10
    """
    db = ctx.obj["db"]
    service = GoodService(db)

    try:
        service.create_good(
            good_id=good_id,
            name=name,
            material=material,
            weight=weight,
            value=value,
            stock=stock,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created good '{name}' (ID: {good_id})")


@good_group.command("list")
@click.option("--name", help="Only show the good with this exact name")
@click.pass_context
def list_goods(ctx, name: str | None):
    """List goods with their stock and value."""
    db = ctx.obj["db"]
    service = GoodService(db)

    goods = service.list_goods(name=name)
    if not goods:
        click.echo("No goods found.")
        return

    click.echo(f"\n{'ID':<6} {'Name':<25} {'Material':<10} {'Value':>10} {'Stock':>7}")
    click.echo("-" * 62)
    for g in goods:
        click.echo(f"{g.id:<6} {g.name:<25} {g.material.value:<10} {g.value:>10,.2f} {g.stock:>7}")


@good_group.command("show")
@click.argument("good_id", type=int)
@click.pass_context
def show_good(ctx, good_id: int):
    """Show all fields of a good."""
    db = ctx.obj["db"]
    service = GoodService(db)

    try:
        g = service.require_good(good_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Good ID: {g.id}")
    click.echo(f"  Name: {g.name}")
    if g.description:
        click.echo(f"  Description: {g.description}")
    click.echo(f"  Material: {g.material.value}")
    click.echo(f"  Weight: {g.weight}")
    click.echo(f"  Value: {g.value:,.2f}")
    click.echo(f"  Stock: {g.stock}")


@good_group.command("update")
@click.argument("good_id", type=int)
@click.option("--name", help="New name")
@click.option("--description", help="New description")
@click.option("--material", type=click.Choice(MATERIALS), help="New material")
@click.option("--weight", help="New weight")
@click.option("--value", help="New monetary value")
@click.pass_context
def update_good(
    ctx,
    good_id: int,
    name: str | None,
    description: str | None,
    material: str | None,
    weight: str | None,
    value: str | None,
):
    """Update a good.

    Stock cannot be changed here; it only moves through transactions.

    Examples:
        tradeledger good update 1 --value 300
    """
    db = ctx.obj["db"]
    service = GoodService(db)

    try:
        service.update_good(
            good_id=good_id,
            name=name,
            description=description,
            material=material,
            weight=weight,
            value=value,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated good {good_id}")


@good_group.command("delete")
@click.argument("good_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_good(ctx, good_id: int, yes: bool):
    """Delete a good.

    Transactions referencing it are kept.
    """
    db = ctx.obj["db"]
    service = GoodService(db)

    try:
        g = service.require_good(good_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"Are you sure you want to delete good '{g.name}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_good(good_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted good {good_id}")


def register_commands(cli: click.Group) -> None:
    """Register good commands with main CLI."""
    cli.add_command(good_group, name="good")
