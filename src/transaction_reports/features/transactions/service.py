import logging
from typing import List, Optional

from ...core.exceptions import ReportingError
from .models import ProductTransaction
from .repository import TransactionRepository
from .schemas import ProductTransactionSchema

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
# Largest offset or limit the store can bind (signed 64-bit)
MAX_STORE_INT = 2**63 - 1


def parse_positive_int(value: Optional[str], default: int) -> int:
    """
    Reads a pagination query value, falling back to ``default`` when it is missing,
    non-numeric or < 1. Values above ``MAX_STORE_INT`` are clamped to it.
    """
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    if parsed < 1:
        return default
    return min(parsed, MAX_STORE_INT)


def _to_transaction_response(transaction: ProductTransaction) -> ProductTransactionSchema:
    return ProductTransactionSchema(
        product_id=transaction.product_id,
        title=transaction.title,
        price=transaction.price,
        description=transaction.description,
        category=transaction.category,
        image=transaction.image,
        sold=transaction.sold,
        date_of_sale=transaction.date_of_sale,
    )


async def list_transactions(
    repository: TransactionRepository,
    month: str,
    search: Optional[str] = None,
    page: int = DEFAULT_PAGE,
    per_page: int = DEFAULT_PER_PAGE,
) -> List[ProductTransactionSchema]:
    """
    Lists one page of the month's transactions, optionally narrowed by a search term.

    Args:
        repository: Store-query layer.
        month: Month number as given by the client; matched against ``dateOfSale`` text.
        search: Optional case-insensitive term matched against title, description or price.
        page: 1-based page number.
        per_page: Page size.

    Returns:
        The records at offset ``(page - 1) * per_page``; an empty list past the end.
    """
    offset = (page - 1) * per_page
    if offset > MAX_STORE_INT:
        return []
    try:
        transactions = await repository.find(month, search=search, offset=offset, limit=per_page)
    except Exception as e:
        logger.error(f"Error fetching transactions: {e}", exc_info=True)
        raise ReportingError("Error fetching transactions.") from e
    logger.debug(f"Listed {len(transactions)} transactions for month={month!r} page={page}")
    return [_to_transaction_response(t) for t in transactions]
