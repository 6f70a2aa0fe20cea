"""Transaction management commands."""

import click
from tradeledger.cli.error_handling import handle_domain_error
from tradeledger.domain.entities import ItemRequest, TransactionDetails, TransactionType
from tradeledger.domain.errors import DomainError
from tradeledger.domain.transaction import TransactionService
from tradeledger.domain.transaction_query import TransactionQueryService
from tradeledger.utils.item_parser import parse_item

TRANSACTION_TYPES = [t.value for t in TransactionType]


def _parse_items(ctx, items: tuple[str, ...]) -> list[ItemRequest]:
    """Parse --item options, or exit with a CLI error."""
    requests = []
    for item in items:
        try:
            requests.append(parse_item(item))
        except ValueError as e:
            click.echo(f"Error: Invalid item: {e}", err=True)
            ctx.exit(1)
    return requests


def _echo_details(details: TransactionDetails) -> None:
    txn = details.transaction
    client_name = details.client.name if details.client is not None else "(deleted)"
    click.echo(f"\nTransaction ID: {txn.id}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Date: {txn.date:%Y-%m-%d %H:%M:%S}")
    click.echo(f"  Client: {client_name} ({txn.client.kind.value})")
    if not txn.stock_applied:
        click.echo("  Stock: NOT APPLIED (update or delete this transaction)")
    for entry in details.items:
        good_name = entry.good.name if entry.good is not None else f"good {entry.item.good_id} (deleted)"
        click.echo(
            f"    {entry.item.quantity:>4} x {good_name:<25} "
            f"@ {entry.item.price_at_transaction:>10,.2f} = {entry.item.subtotal:>12,.2f}"
        )
    click.echo(f"  Total: {txn.total_amount:,.2f}")


def _echo_list(transactions: list[TransactionDetails]) -> None:
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 80)
    for details in transactions:
        _echo_details(details)
    click.echo("-" * 80)
    total = sum(d.transaction.total_amount for d in transactions)
    click.echo(f"TOTAL: {total:,.2f} | Count: {len(transactions)}")


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("create")
@click.argument("type", type=click.Choice(TRANSACTION_TYPES, case_sensitive=False))
@click.argument("client_name")
@click.option("--item", "items", multiple=True, required=True, help='Item as "NAME:QUANTITY" (repeatable)')
@click.pass_context
def create_transaction(ctx, type: str, client_name: str, items: tuple[str, ...]):
    """Create a purchase (by an acquirer) or a sale (by a supplier).

    Examples:
        tradeledger transaction create purchase "Geralt" --item "Silver Sword:2"
        tradeledger transaction create sale "Zoltan" --item "Silver Sword:5" --item "Oak Shield:1"
    """
    db = ctx.obj["db"]
    service = TransactionService(db)
    requests = _parse_items(ctx, items)

    try:
        txn = service.create_transaction(type=type, client_name=client_name, items=requests)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {txn.id}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Client: {client_name}")
    click.echo(f"  Items: {len(txn.items)}")
    click.echo(f"  Total: {txn.total_amount:,.2f}")


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int):
    """Show a transaction with its client and goods."""
    service = TransactionQueryService(ctx.obj["db"])
    try:
        details = service.get_transaction_details(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    _echo_details(details)


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.argument("type", type=click.Choice(TRANSACTION_TYPES, case_sensitive=False))
@click.argument("client_name")
@click.option("--item", "items", multiple=True, required=True, help='Item as "NAME:QUANTITY" (repeatable)')
@click.pass_context
def update_transaction(ctx, transaction_id: int, type: str, client_name: str, items: tuple[str, ...]):
    """Replace a transaction's type, client and items.

    The previous stock effects are reversed before the new ones are applied.

    Examples:
        tradeledger transaction update 1 sale "Zoltan" --item "Oak Shield:4"
    """
    db = ctx.obj["db"]
    service = TransactionService(db)
    requests = _parse_items(ctx, items)

    try:
        txn = service.update_transaction(
            transaction_id=transaction_id, type=type, client_name=client_name, items=requests
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {txn.id}")
    click.echo(f"  Total: {txn.total_amount:,.2f}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction and reverse its stock effects.

    Examples:
        tradeledger transaction delete 1
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    if service.get_transaction(transaction_id) is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete transaction {transaction_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


@transaction_group.command("by-client")
@click.argument("client_name")
@click.pass_context
def list_by_client(ctx, client_name: str):
    """List all transactions of an acquirer or supplier."""
    service = TransactionQueryService(ctx.obj["db"])
    try:
        transactions = service.find_by_client_name(client_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    _echo_list(transactions)


@transaction_group.command("by-date")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date, inclusive (YYYY-MM-DD or relative like 'today')")
@click.option("--type", "type_", type=click.Choice(TRANSACTION_TYPES, case_sensitive=False), help="Only this type")
@click.pass_context
def list_by_date(ctx, start_date: str | None, end_date: str | None, type_: str | None):
    """List transactions dated within a range.

    Examples:
        tradeledger transaction by-date --start-date 2024-01-01 --end-date today --type sale
    """
    service = TransactionQueryService(ctx.obj["db"])
    try:
        transactions = service.find_by_date_range(start_date, end_date, type=type_)
    except DomainError as e:
        handle_domain_error(ctx, e)
    _echo_list(transactions)


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
