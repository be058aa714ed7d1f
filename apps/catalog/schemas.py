"""Transfer objects exposed by the catalog API."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, field_validator

PRICE_QUANTUM = Decimal("0.0001")


class CategoryDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: Optional[str] = None
    image_url: Optional[str] = None


class ProductDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    image_url: Optional[str] = None
    stock: float = 0
    registered_at: Optional[datetime] = None
    category_id: Optional[int] = None

    @field_validator("price")
    @classmethod
    def quantize_price(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        # Same scale as the NUMERIC(10,4) column, so create and fetch agree
        if value is None:
            return None
        try:
            return value.quantize(PRICE_QUANTUM)
        except InvalidOperation:
            raise ValueError("price has too many digits")


class CategoryWithProductsDTO(CategoryDTO):
    products: List[ProductDTO] = []
