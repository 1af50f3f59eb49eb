"""
Product domain model
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from bazzarnet.core.config import config

# Category filter value meaning "do not filter by category"
ALL_CATEGORIES = "all"


def utc_now():
    """Helper function for Pydantic default_factory to get current UTC time"""
    return datetime.now(timezone.utc)


class ProductUnit(str, Enum):
    """Unit of measurement a product is sold in"""
    PIECE = "pc"
    KILOGRAM = "kg"
    GRAM = "g"
    LITER = "L"
    MILLILITER = "ml"
    DOZEN = "dozen"
    PACK = "pack"
    SET = "set"
    PAIR = "pair"
    UNIT = "unit"


class ProductCategory(str, Enum):
    """Business category, shared with store categories"""
    GROCERIES = "Groceries"
    BAKERY = "Bakery"
    BUTCHER = "Butcher"
    CAFE = "Cafe"
    ELECTRONICS = "Electronics"
    FURNITURE = "Furniture"
    DECOR = "Decor"
    CLOTHING = "Clothing"
    OTHER = "Other"


class StoreSummary(BaseModel):
    """Store fields populated onto a product for display"""
    id: str
    name: Optional[str] = None
    logo: Optional[str] = None


class ProductBase(BaseModel):
    """Base Product model with all common fields"""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    price: float = Field(..., ge=0)
    original_price: Optional[float] = Field(None, ge=0)  # shown struck-through for discounts
    stock: int = Field(default=0, ge=0)
    unit: ProductUnit = ProductUnit.PIECE
    category: ProductCategory
    image: str = Field(default_factory=lambda: config.default_product_image)

    # Owning store id, or the populated summary when the caller asked for it
    store: Union[StoreSummary, str]

    # Derived from the reviews collection; never written by clients
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    num_reviews: int = Field(default=0, ge=0)

    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def store_id(self) -> str:
        return self.store.id if isinstance(self.store, StoreSummary) else self.store
