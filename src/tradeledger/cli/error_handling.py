"""CLI error handling helpers."""

import logging

import click

from tradeledger.domain.errors import DomainError, TransactionUpdateReversed

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    logger.debug("Command failed: %r", error)
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, TransactionUpdateReversed):
        click.echo(
            "The original items were reversed; stock no longer reflects this transaction.",
            err=True,
        )
    ctx.exit(1)
