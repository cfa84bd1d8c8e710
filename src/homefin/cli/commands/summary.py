"""Monthly summary command."""

import json

import click

from homefin.cli.error_handling import handle_domain_error
from homefin.cli.parsing import format_money
from homefin.domain.insights import InsightAdvisor
from homefin.domain.summary import MonthlySummaryService


def _build_advisor() -> InsightAdvisor:
    """Create the advisor used by --insights."""
    from homefin.utils.gemini import GeminiInsightGenerator

    return InsightAdvisor(generator=GeminiInsightGenerator())


@click.command("summary")
@click.option("--month", required=True, help="Month (1-12, e.g. 3 or 03)")
@click.option("--year", required=True, help="Four-digit year")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.option("--insights", is_flag=True, help="Add short tips generated from the summary")
@click.pass_context
def summary(ctx, month: str, year: str, as_json: bool, insights: bool):
    """Show income, expenses, card spend and balance for one month.

    Card purchases count once, in the month they were made, with one
    installment's worth of their amount. Purchases made for someone else
    are part of the card total but not of your expenses.

    Examples:
        homefin summary --month 3 --year 2024
        homefin summary --month 03 --year 2024 --json
    """
    service = MonthlySummaryService(ctx.obj["db"])
    try:
        result = service.summarize(month, year)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    tips: list[str] = []
    if insights:
        advisor = ctx.obj.get("advisor") or _build_advisor()
        tips = advisor.advise(result)

    if as_json:
        payload: dict = dict(result.to_dict())
        if insights:
            payload["insights"] = tips
        click.echo(json.dumps(payload, default=float))
        return

    month_label = f"{int(year):04d}-{int(month):02d}"
    click.echo(f"\nSummary for {month_label}")
    click.echo("=" * 40)
    click.echo(f"{'Income':<20}{format_money(result.total_income):>20}")
    click.echo(f"{'Expenses':<20}{format_money(result.total_expenses):>20}")
    click.echo(f"{'  Paid so far':<20}{format_money(result.paid_expenses):>20}")
    click.echo(f"{'Card bill':<20}{format_money(result.card_total):>20}")
    click.echo("-" * 40)
    click.echo(f"{'Balance':<20}{format_money(result.balance):>20}")

    if tips:
        click.echo("\nInsights:")
        for tip in tips:
            click.echo(f"  - {tip}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
