"""
Store-query layer for product transactions.

Every endpoint and CLI command reaches the database through a
``TransactionRepository``; it is built once at startup and handed to request
handlers as a dependency.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from tortoise.expressions import Q
from tortoise.functions import Count

from .models import ProductTransaction

logger = logging.getLogger(__name__)


def month_filter(month: str) -> Q:
    """
    Matches records whose ``date_of_sale`` contains ``-<month>-`` or ``-0<month>-``.

    This is a substring match on the stored text, not a date comparison, so
    ``"3"`` matches both ``2024-03-05`` and ``2024-3-15``. Values that are not
    a month (``"13"``, ``"abc"``) simply match nothing in real data.
    """
    return Q(date_of_sale__contains=f"-{month}-") | Q(date_of_sale__contains=f"-0{month}-")


def search_filter(search: str) -> Q:
    """Case-insensitive substring match on title, description or the price as text."""
    return (
        Q(title__icontains=search)
        | Q(description__icontains=search)
        | Q(price__icontains=search)
    )


class TransactionRepository:
    async def replace_all(self, records: Sequence[ProductTransaction]) -> int:
        """
        Deletes every stored transaction, then bulk-inserts ``records``.

        The two steps are not wrapped in a transaction: if the insert fails the
        collection stays empty.
        """
        deleted = await ProductTransaction.all().delete()
        logger.info(f"Deleted {deleted} existing product transactions")
        if records:
            await ProductTransaction.bulk_create(list(records))
        return len(records)

    async def find(
        self, month: str, search: Optional[str] = None, offset: int = 0, limit: int = 10
    ) -> List[ProductTransaction]:
        query = ProductTransaction.filter(month_filter(month))
        if search:
            query = query.filter(search_filter(search))
        return await query.order_by("id").offset(offset).limit(limit)

    async def count(self, month: str, **filters: Any) -> int:
        return await ProductTransaction.filter(month_filter(month), **filters).count()

    async def prices(self, month: str) -> List[float]:
        """Non-null prices of the month's transactions."""
        return await ProductTransaction.filter(
            month_filter(month), price__isnull=False
        ).values_list("price", flat=True)

    async def count_by_category(self, month: str) -> List[Dict[str, Any]]:
        return await (
            ProductTransaction.filter(month_filter(month))
            .annotate(count=Count("id"))
            .group_by("category")
            .values("category", "count")
        )
