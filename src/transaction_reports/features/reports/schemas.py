"""Response schemas for the monthly reports.

JSON attribute names are camelCase (``totalSaleAmount``, ``barChart``),
exposed as aliases of snake_case fields."""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from ..transactions.schemas import ProductTransactionSchema


class StatisticsResponse(BaseModel):
    total_sale_amount: float = Field(0.0, alias="totalSaleAmount")
    total_sold_items: int = Field(0, alias="totalSoldItems")
    total_not_sold_items: int = Field(0, alias="totalNotSoldItems")

    model_config = ConfigDict(populate_by_name=True)


class PriceRangeCount(BaseModel):
    range: str
    count: int


class CategoryCount(BaseModel):
    category: Optional[str] = None
    count: int


class CombinedDataResponse(BaseModel):
    transactions: List[ProductTransactionSchema]
    statistics: StatisticsResponse
    bar_chart: List[PriceRangeCount] = Field(..., alias="barChart")
    pie_chart: List[CategoryCount] = Field(..., alias="pieChart")

    model_config = ConfigDict(populate_by_name=True)
