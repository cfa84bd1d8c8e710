"""CLI error handling helpers."""

import logging

import click

from homefin.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    logger.debug("Command failed: %r", error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
