from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Query, status

from app.core.config import settings
from app.core.errors import unwrap
from app.models.product import Product
from app.schemas.product_schemas import ErrorResponse, ProductDeleteResponse, ProductListResponse
from app.services.product_service import product_service


router = APIRouter(
    prefix="/products",
    tags=["Products"],
    responses={401: {"model": ErrorResponse}},
)

# Literal paths are registered before "/{product_id}" so "search" and
# "stats" are never captured as ids.


@router.get("/search", response_model=List[Product], responses={400: {"model": ErrorResponse}})
async def search_products(name: Optional[str] = None):
    """Case-insensitive name search"""
    return unwrap(await product_service.search_products(name))


@router.get("/stats", response_model=Dict[str, int])
async def get_product_stats():
    """Product count per category"""
    return unwrap(await product_service.get_category_stats())


@router.get("", response_model=ProductListResponse, responses={400: {"model": ErrorResponse}})
async def list_products(
    category: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1),
):
    return unwrap(await product_service.list_products(category=category, page=page, limit=limit))


@router.get("/{product_id}", response_model=Product, responses={404: {"model": ErrorResponse}})
async def get_product(product_id: str):
    return unwrap(await product_service.get_product(product_id))


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_product(payload: Any = Body(None)):
    """Create a product; the server assigns the id"""
    return unwrap(await product_service.create_product(payload))


@router.put(
    "/{product_id}",
    response_model=Product,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_product(product_id: str, payload: Any = Body(None)):
    """Replace every field of a product except its id"""
    return unwrap(await product_service.update_product(product_id, payload))


@router.delete("/{product_id}", response_model=ProductDeleteResponse, responses={404: {"model": ErrorResponse}})
async def delete_product(product_id: str):
    product = unwrap(await product_service.delete_product(product_id))
    return {"message": "Product deleted", "product": product}
