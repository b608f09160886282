"""
Reports Service Module

Monthly aggregates over product transactions: sale statistics, a fixed
price-range histogram and a per-category distribution, plus the combined
report that assembles them with the first page of the month's listing.
"""

import logging
import math
from typing import List, NamedTuple

from ...core.exceptions import ReportingError
from ..transactions import service as transaction_service
from ..transactions.repository import TransactionRepository
from .schemas import (
    StatisticsResponse, PriceRangeCount, CategoryCount, CombinedDataResponse
)

logger = logging.getLogger(__name__)


class PriceRange(NamedTuple):
    label: str
    min: float
    max: float


# Inclusive on both ends; the last range has no upper bound
PRICE_RANGES: List[PriceRange] = [
    PriceRange("0 - 100", 0, 100),
    PriceRange("101 - 200", 101, 200),
    PriceRange("201 - 300", 201, 300),
    PriceRange("301 - 400", 301, 400),
    PriceRange("401 - 500", 401, 500),
    PriceRange("501 - 600", 501, 600),
    PriceRange("601 - 700", 601, 700),
    PriceRange("701 - 800", 701, 800),
    PriceRange("801 - 900", 801, 900),
    PriceRange("901 - above", 901, math.inf),
]


async def generate_statistics(repository: TransactionRepository, month: str) -> StatisticsResponse:
    """
    Computes the month's sale statistics.

    Args:
        repository: Store-query layer.
        month: Month number matched against ``dateOfSale``.

    Returns:
        StatisticsResponse: An object containing:
            - total_sale_amount: Sum of the price of every matching record, sold or not
            - total_sold_items: Matching records with ``sold`` true
            - total_not_sold_items: Matching records with ``sold`` false
    """
    try:
        prices = await repository.prices(month)
        sold = await repository.count(month, sold=True)
        not_sold = await repository.count(month, sold=False)
    except Exception as e:
        logger.error(f"Error fetching statistics: {e}", exc_info=True)
        raise ReportingError("Error fetching statistics.") from e

    return StatisticsResponse(
        total_sale_amount=float(sum(prices)),
        total_sold_items=sold,
        total_not_sold_items=not_sold,
    )


async def generate_bar_chart(repository: TransactionRepository, month: str) -> List[PriceRangeCount]:
    """
    Counts the month's records per price range.

    Always returns one entry per range in ``PRICE_RANGES`` order, including
    empty ranges. Prices between two ranges (e.g. 100.5) fall in neither.
    """
    try:
        buckets = []
        for price_range in PRICE_RANGES:
            filters = {"price__gte": price_range.min}
            if price_range.max != math.inf:
                filters["price__lte"] = price_range.max
            count = await repository.count(month, **filters)
            buckets.append(PriceRangeCount(range=price_range.label, count=count))
    except Exception as e:
        logger.error(f"Error fetching bar chart data: {e}", exc_info=True)
        raise ReportingError("Error fetching bar chart data.") from e
    return buckets


async def generate_pie_chart(repository: TransactionRepository, month: str) -> List[CategoryCount]:
    """Counts the month's records per category; categories with no records are absent."""
    try:
        rows = await repository.count_by_category(month)
    except Exception as e:
        logger.error(f"Error fetching pie chart data: {e}", exc_info=True)
        raise ReportingError("Error fetching pie chart data.") from e
    return [CategoryCount(category=row["category"], count=row["count"]) for row in rows]


async def generate_combined_report(repository: TransactionRepository, month: str) -> CombinedDataResponse:
    """
    Builds every report for a month in one response.

    Runs the listing (first page, no search), statistics, bar chart and pie
    chart in sequence. A failure in any step fails the whole report.
    """
    try:
        transactions = await transaction_service.list_transactions(repository, month)
        statistics = await generate_statistics(repository, month)
        bar_chart = await generate_bar_chart(repository, month)
        pie_chart = await generate_pie_chart(repository, month)
    except ReportingError as e:
        logger.error(f"Error fetching combined data for month={month!r}: {e.message}")
        raise ReportingError("Error fetching combined data.") from e

    return CombinedDataResponse(
        transactions=transactions,
        statistics=statistics,
        bar_chart=bar_chart,
        pie_chart=pie_chart,
    )
