"""
API schemas for Review endpoints
"""

from datetime import datetime
from typing import Union

from pydantic import BaseModel, Field

from bazzarnet.models.review import Reviewer


class ReviewCreate(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1, max_length=1000)


class ReviewResponse(BaseModel):
    id: str
    user: Union[Reviewer, str]
    product: str
    rating: int
    comment: str
    created_at: datetime


class ReviewCreatedResponse(BaseModel):
    message: str = "Review added successfully"
    review: ReviewResponse
