"""Product request/response schemas."""

import uuid
from typing import List, Optional

from pydantic import Field

from records_api.schemas.common import APIModel, Envelope


class ProductCreate(APIModel):
    name: Optional[str] = None
    category: Optional[str] = None
    # Numeric strings ("9.99") are coerced; anything else is a 400.
    price: Optional[float] = None


class ProductOut(APIModel):
    id: uuid.UUID
    name: str
    category: str
    price: float

    model_config = {"from_attributes": True, "populate_by_name": True}


class ProductResponse(Envelope):
    data: ProductOut


class ProductListResponse(Envelope):
    total_products: int = Field(alias="totalProducts")
    data: List[ProductOut]
