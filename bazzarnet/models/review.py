"""
Review domain model
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from bazzarnet.models.product import utc_now


class Reviewer(BaseModel):
    """Public profile fields of the review author"""
    id: str
    name: Optional[str] = None
    profile_image: Optional[str] = None


class Review(BaseModel):
    id: Optional[str] = None
    user: str
    product: str
    rating: int = Field(..., ge=1, le=5)
    comment: str
    created_at: datetime = Field(default_factory=utc_now)
