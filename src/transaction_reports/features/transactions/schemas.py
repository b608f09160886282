from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ProductTransactionSchema(BaseModel):
    """Wire shape of a product transaction.

    Used both to coerce records fetched from the seed source and to serialize
    listing results, so the JSON attribute names (``id``, ``dateOfSale``) are
    aliases of the model's field names.
    """
    product_id: Optional[int] = Field(None, alias="id", description="Source-provided identifier")
    title: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    sold: Optional[bool] = None
    date_of_sale: Optional[str] = Field(None, alias="dateOfSale", description="ISO-like date string")

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )
