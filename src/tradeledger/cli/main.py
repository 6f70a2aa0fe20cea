"""Main CLI entry point."""

import click
from tradeledger.database.factories import DB_PATH_ENV_VAR, create_sqlite_database
from tradeledger.logging_config import configure_logging

# Import and register all commands at module level
from tradeledger.cli.commands import client, good, transaction

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV_VAR} environment variable)",
    envvar=DB_PATH_ENV_VAR,
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="TRADELEDGER_LOG_LEVEL",
    help="Logging level for messages written to stderr",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Tradeledger - goods, clients and stock-moving transactions.

    Acquirers purchase goods (stock goes down), suppliers sell goods to the
    shop (stock goes up). Every transaction can be updated or deleted and
    its stock effects are reversed exactly.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
good.register_commands(cli)
client.register_commands(cli)
transaction.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
