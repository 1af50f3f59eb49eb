"""
Admin API endpoints
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from bazzarnet.core.errors import ErrorResponseModel
from bazzarnet.dependencies.auth import require_admin
from bazzarnet.dependencies.services import get_admin_service
from bazzarnet.models.user import User
from bazzarnet.schemas.admin import DashboardStatsResponse
from bazzarnet.schemas.product import MessageResponse, ProductResponse
from bazzarnet.services.admin import AdminService

router = APIRouter()


@router.get(
    "/dashboard/stats",
    response_model=DashboardStatsResponse,
    summary="Get Dashboard Statistics",
)
async def get_dashboard_stats(
    service: AdminService = Depends(get_admin_service),
    user: User = Depends(require_admin),
):
    """
    Product, store and review counts for the admin dashboard.
    """
    return await service.get_dashboard_stats()


@router.put(
    "/products/{product_id}",
    response_model=ProductResponse,
    responses={400: {"model": ErrorResponseModel}, 404: {"model": ErrorResponseModel}},
)
async def admin_update_product(
    product_id: str,
    payload: Dict[str, Any] = Body(...),
    service: AdminService = Depends(get_admin_service),
    user: User = Depends(require_admin),
):
    """
    Update any product regardless of the owning store.
    """
    return await service.update_product(user, product_id, payload)


@router.delete(
    "/products/{product_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponseModel}},
)
async def admin_delete_product(
    product_id: str,
    service: AdminService = Depends(get_admin_service),
    user: User = Depends(require_admin),
):
    """
    Delete any product regardless of the owning store.
    """
    await service.delete_product(user, product_id)
    return MessageResponse(message="Product removed")
