"""
Records API - Product Route Handlers
====================================

What:  POST /api/product, GET /api/products?category=, DELETE /api/product/{product_id}
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.database import get_db_session
from records_api.schemas.common import Envelope, ErrorResponse
from records_api.schemas.product import ProductCreate, ProductListResponse, ProductResponse
from records_api.services.product_service import product_service

router = APIRouter(prefix="/api", tags=["Products"])


@router.post(
    "/product",
    response_model=ProductResponse,
    responses={
        400: {"description": "name, category or price missing", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a product",
)
async def create_product(
    payload: Optional[ProductCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> ProductResponse:
    return await product_service.create_product(db, payload or ProductCreate())


@router.get(
    "/products",
    response_model=ProductListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List products, optionally filtered by category",
)
async def list_products(
    category: Optional[str] = Query(
        default=None,
        description="Only return products in this category (exact match)",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> ProductListResponse:
    return await product_service.list_products(db, category=category)


@router.delete(
    "/product/{product_id}",
    response_model=Envelope,
    responses={
        404: {"description": "Product not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a product",
)
async def delete_product(
    product_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Envelope:
    return await product_service.delete_product(db, product_id)
