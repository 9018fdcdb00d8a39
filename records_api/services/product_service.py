"""
Records API - Product Service
=============================

What:  Create, list (optionally by category) and delete products.
Products have no relations, so deleting one touches nothing else.
"""

import logging
import uuid
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.exceptions import ValidationError
from records_api.models.product import Product
from records_api.schemas.common import Envelope
from records_api.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductOut,
    ProductResponse,
)
from records_api.services.base import RecordService, is_blank, store_errors

logger = logging.getLogger(__name__)


def _to_out(product: Product) -> ProductOut:
    return ProductOut(
        id=product.id,
        name=product.name,
        category=product.category,
        price=product.price,
    )


class ProductService(RecordService):
    model = Product
    resource = "Product"

    async def create_product(self, db: AsyncSession, payload: ProductCreate) -> ProductResponse:
        """
        Insert a new product.

        A price of 0 counts as missing, same as an absent price.

        Raises:
            ValidationError: name, category or price missing/empty (→ 400)
            DatabaseError: insert failed (→ 500)
        """
        if is_blank(payload.name) or is_blank(payload.category) or not payload.price:
            raise ValidationError(message="name, category and price are required")

        with store_errors("create_product"):
            product = Product(
                id=uuid.uuid4(),
                name=payload.name.strip(),
                category=payload.category.strip(),
                price=payload.price,
            )
            db.add(product)
            await db.flush()
            logger.info("Product created: %s (%s)", product.id, product.category)

            return ProductResponse(msg="Product created successfully", data=_to_out(product))

    async def list_products(
        self, db: AsyncSession, category: Optional[str] = None
    ) -> ProductListResponse:
        """
        List products, optionally only those whose category equals `category`.

        An empty category parameter means no filter. totalProducts is the
        size of the whole collection regardless of the filter.
        """
        with store_errors("list_products"):
            query = select(Product)
            count_query = select(func.count(Product.id))
            if category:
                query = query.where(Product.category == category)

            result = await db.execute(query.order_by(Product.created_at, Product.id))
            products = list(result.scalars().all())

            count_result = await db.execute(count_query)
            total = count_result.scalar() or 0

            return ProductListResponse(
                msg="Products fetched successfully",
                total_products=total,
                data=[_to_out(p) for p in products],
            )

    async def delete_product(self, db: AsyncSession, product_id: str) -> Envelope:
        with store_errors("delete_product"):
            await self._delete_by_id(db, product_id)
            return Envelope(msg="Product deleted successfully")


product_service = ProductService()
