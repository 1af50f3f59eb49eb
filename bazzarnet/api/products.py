"""
Product API endpoints
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from bazzarnet.core.config import config
from bazzarnet.core.errors import ErrorResponseModel
from bazzarnet.dependencies.auth import require_vendor
from bazzarnet.dependencies.services import get_product_service
from bazzarnet.models.user import User
from bazzarnet.schemas.product import (
    MessageResponse,
    ProductCreate,
    ProductPage,
    ProductResponse,
    RecommendedProduct,
)
from bazzarnet.services.product import ProductService

router = APIRouter()


@router.get(
    "",
    response_model=ProductPage,
    responses={400: {"model": ErrorResponseModel}},
)
async def list_products(
    search: Optional[str] = Query(None, description="Case-insensitive text to find in product names"),
    category: Optional[str] = Query(None, description="Exact category, or 'all'"),
    store: Optional[str] = Query(None, description="Owning store id, or 'all'"),
    pincode: Optional[str] = Query(None, description="Only products of active stores with this pin code"),
    page: int = Query(1, ge=1, description="1-indexed page number"),
    limit: int = Query(config.default_page_size, ge=1, le=100, description="Page size"),
    service: ProductService = Depends(get_product_service),
):
    """
    Search and list products with optional filters. All filters are combined.
    A pincode without any active store returns an empty page.
    """
    return await service.search_products(
        search=search, category=category, store=store, pincode=pincode, page=page, limit=limit
    )


@router.get("/recommended", response_model=List[RecommendedProduct])
async def get_recommended_products(
    pincode: Optional[str] = Query(None, description="Restrict to stores with this pin code"),
    service: ProductService = Depends(get_product_service),
):
    """
    Random selection of up to six active products.
    """
    return await service.get_recommended_products(pincode)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponseModel}},
)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
):
    """
    Get a product by its ID, with the store name and logo.
    """
    return await service.get_product(product_id)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponseModel},
        401: {"model": ErrorResponseModel},
        403: {"model": ErrorResponseModel},
    },
)
async def create_product(
    product: ProductCreate,
    service: ProductService = Depends(get_product_service),
    user: User = Depends(require_vendor),
):
    """
    Create a product in the vendor's store. The vendor profile must be complete.
    """
    return await service.create_product(user, product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponseModel},
        401: {"model": ErrorResponseModel},
        403: {"model": ErrorResponseModel},
        404: {"model": ErrorResponseModel},
    },
)
async def update_product(
    product_id: str,
    payload: Any = Body(None),
    service: ProductService = Depends(get_product_service),
    user: User = Depends(require_vendor),
):
    """
    Partially update a product. Only the vendor owning the product's store may update it.
    """
    return await service.update_product(user, product_id, payload)


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={
        401: {"model": ErrorResponseModel},
        403: {"model": ErrorResponseModel},
        404: {"model": ErrorResponseModel},
    },
)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
    user: User = Depends(require_vendor),
):
    """
    Delete a product. Only the vendor owning the product's store may delete it.
    """
    await service.delete_product(user, product_id)
    return MessageResponse(message="Product removed")
