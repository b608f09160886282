"""API route for listing product transactions."""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from ...core.dependencies import get_repository
from .repository import TransactionRepository
from .schemas import ProductTransactionSchema
from . import service

router = APIRouter(tags=["Transactions"])


@router.get(
    "/transactions",
    response_model=List[ProductTransactionSchema],
    summary="List a month's transactions, paginated",
)
async def list_transactions(
    repository: TransactionRepository = Depends(get_repository),
    month: str = Query(..., description="Month number (1-12) matched against dateOfSale"),
    search: Optional[str] = Query(None, description="Matches title, description or price"),
    # Kept as text so malformed values fall back to the defaults instead of failing
    page: Optional[str] = Query(None, description="Page number, default 1"),
    per_page: Optional[str] = Query(None, alias="perPage", description="Records per page, default 10"),
):
    return await service.list_transactions(
        repository,
        month,
        search=search,
        page=service.parse_positive_int(page, service.DEFAULT_PAGE),
        per_page=service.parse_positive_int(per_page, service.DEFAULT_PER_PAGE),
    )
