"""Main CLI entry point."""

import logging

import click
from dotenv import load_dotenv

from homefin.database.factories import create_sqlite_database

# Import and register all commands at module level
from homefin.cli.commands import (
    card,
    categories,
    debt,
    expense,
    income,
    summary,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides HOMEFIN_DB_PATH environment variable)",
    envvar="HOMEFIN_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="HOMEFIN_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Homefin - Personal finance tracker.

    Keep income, planned expenses, credit card purchases in installments and
    money owed to you by others, and see how each month adds up.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
income.register_commands(cli)
expense.register_commands(cli)
card.register_commands(cli)
debt.register_commands(cli)
summary.register_commands(cli)
categories.register_commands(cli)


def main():
    """Main entry point for CLI."""
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
