"""List suggested categories."""

import click

from homefin.domain.entities import SUGGESTED_CATEGORIES


@click.command("categories")
def list_categories():
    """Show the suggested income and expense categories.

    Categories are free text; these are just the usual ones.
    """
    click.echo("Income categories:")
    for name in SUGGESTED_CATEGORIES.income:
        click.echo(f"  {name}")
    click.echo("\nExpense categories:")
    for name in SUGGESTED_CATEGORIES.expense:
        click.echo(f"  {name}")


def register_commands(cli):
    """Register categories command with main CLI."""
    cli.add_command(list_categories)
