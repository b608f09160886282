import asyncio
import logging
from typing import Optional

import httpx
import typer
from tortoise import Tortoise

from ..core.config import TORTOISE_ORM_CONFIG, SEED_DATA_URL, SEED_FETCH_TIMEOUT
from ..core.exceptions import ReportingError
from ..core.logging_config import configure_logging
from ..features.reports import service as report_service
from ..features.seed import service as seed_service
from ..features.transactions.repository import TransactionRepository

logger = logging.getLogger(__name__)

app = typer.Typer(name="transaction-reports", help="CLI for seeding and reporting on product transactions.")


# Shared async context manager for database connection
class DBConnection:
    async def __aenter__(self):
        await Tortoise.init(config=TORTOISE_ORM_CONFIG)
        await Tortoise.generate_schemas(safe=True) # Generate schema if it doesn't exist
        return TransactionRepository()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await Tortoise.close_connections()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level.")):
    configure_logging("DEBUG" if verbose else "WARNING")


@app.command("seed")
def seed_command(
    url: Optional[str] = typer.Option(None, help="Seed dataset URL. Defaults to SEED_DATA_URL."),
):
    """Replaces all transactions with the remote seed dataset."""
    asyncio.run(_seed(url or SEED_DATA_URL))


async def _seed(url: str):
    async with DBConnection() as repository:
        typer.echo(f"Fetching seed data from {url}...")
        async with httpx.AsyncClient(timeout=SEED_FETCH_TIMEOUT) as client:
            try:
                inserted = await seed_service.initialize_database(repository, client, url)
            except ReportingError as e:
                typer.secho(f"Error: {e.message} ({e.__cause__})", fg=typer.colors.RED)
                raise typer.Exit(code=1)
        typer.secho(f"{seed_service.SEED_SUCCESS_MESSAGE} Inserted {inserted} record(s).", fg=typer.colors.GREEN)


@app.command("statistics")
def statistics_command(month: str = typer.Option(..., help="Month number (1-12).")):
    """Prints the total sale amount and sold/not sold counts for a month."""
    asyncio.run(_statistics(month))


async def _statistics(month: str):
    async with DBConnection() as repository:
        try:
            stats = await report_service.generate_statistics(repository, month)
        except ReportingError as e:
            typer.secho(f"Error: {e.message}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        typer.echo(f"Total sale amount:    {stats.total_sale_amount:.2f}")
        typer.echo(f"Total sold items:     {stats.total_sold_items}")
        typer.echo(f"Total not sold items: {stats.total_not_sold_items}")


@app.command("bar-chart")
def bar_chart_command(month: str = typer.Option(..., help="Month number (1-12).")):
    """Prints the number of a month's transactions per price range."""
    asyncio.run(_bar_chart(month))


async def _bar_chart(month: str):
    async with DBConnection() as repository:
        try:
            buckets = await report_service.generate_bar_chart(repository, month)
        except ReportingError as e:
            typer.secho(f"Error: {e.message}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        for bucket in buckets:
            typer.echo(f"{bucket.range:>12}  {bucket.count}")


@app.command("pie-chart")
def pie_chart_command(month: str = typer.Option(..., help="Month number (1-12).")):
    """Prints the number of a month's transactions per category."""
    asyncio.run(_pie_chart(month))


async def _pie_chart(month: str):
    async with DBConnection() as repository:
        try:
            categories = await report_service.generate_pie_chart(repository, month)
        except ReportingError as e:
            typer.secho(f"Error: {e.message}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        if not categories:
            typer.secho(f"No transactions found for month {month}.", fg=typer.colors.YELLOW)
        for entry in categories:
            typer.echo(f"{entry.category or '(none)'}: {entry.count}")


if __name__ == "__main__":
    app()
