"""
Product review endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, status

from bazzarnet.core.errors import ErrorResponseModel
from bazzarnet.dependencies.auth import require_customer
from bazzarnet.dependencies.services import get_review_service
from bazzarnet.models.user import User
from bazzarnet.schemas.review import ReviewCreate, ReviewCreatedResponse, ReviewResponse
from bazzarnet.services.review import ReviewService

router = APIRouter()


@router.post(
    "/{product_id}/reviews",
    response_model=ReviewCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponseModel},
        401: {"model": ErrorResponseModel},
        403: {"model": ErrorResponseModel},
        404: {"model": ErrorResponseModel},
    },
)
async def create_review(
    product_id: str,
    review: ReviewCreate,
    service: ReviewService = Depends(get_review_service),
    user: User = Depends(require_customer),
):
    """
    Review a product the customer has received. One review per customer and product.
    """
    created = await service.submit_review(user, product_id, review.rating, review.comment)
    return ReviewCreatedResponse(review=ReviewResponse(**created.model_dump()))


@router.get("/{product_id}/reviews", response_model=List[ReviewResponse])
async def list_reviews(
    product_id: str,
    service: ReviewService = Depends(get_review_service),
):
    """
    Reviews of a product, newest first, with reviewer name and profile image.
    """
    return await service.list_reviews(product_id)
