import logging
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ...core.dependencies import get_repository
from ..transactions.repository import TransactionRepository
from .schemas import StatisticsResponse, PriceRangeCount, CategoryCount
from . import service as report_service

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))

router = APIRouter(tags=["Reports"])


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(
    repository: TransactionRepository = Depends(get_repository),
    month: str = Query(..., description="Month number (1-12) matched against dateOfSale"),
):
    return await report_service.generate_statistics(repository, month)


@router.get("/bar_chart", response_model=List[PriceRangeCount])
async def get_bar_chart(
    repository: TransactionRepository = Depends(get_repository),
    month: str = Query(..., description="Month number (1-12) matched against dateOfSale"),
):
    return await report_service.generate_bar_chart(repository, month)


@router.get("/pie_chart", response_model=List[CategoryCount])
async def get_pie_chart(
    repository: TransactionRepository = Depends(get_repository),
    month: str = Query(..., description="Month number (1-12) matched against dateOfSale"),
):
    return await report_service.generate_pie_chart(repository, month)


@router.get("/combined_data", response_class=HTMLResponse)
async def get_combined_data(
    request: Request,
    repository: TransactionRepository = Depends(get_repository),
    month: str = Query(..., description="Month number (1-12) matched against dateOfSale"),
):
    combined = await report_service.generate_combined_report(repository, month)
    logger.info(f"Rendering combined data for month={month!r}")
    return templates.TemplateResponse(
        request,
        "combined_data.html",
        {"month": month, "combined_data": combined.model_dump(by_alias=True)},
    )
