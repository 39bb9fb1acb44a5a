# app/domain/schemas.py
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ProductPriceOut(BaseModel):
    """Schema dla ceny produktu (response)."""

    product_id: str = Field(..., alias="productId")
    price: Decimal = Field(..., ge=0, decimal_places=2)

    model_config = ConfigDict(frozen=True, populate_by_name=True)
