"""
API schemas for Product endpoints
"""

from typing import ClassVar, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from bazzarnet.models.product import ProductBase, ProductCategory, ProductUnit


class ProductCreate(BaseModel):
    """Schema for creating a new product. The owning store comes from the vendor."""
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=2000)
    price: float = Field(..., ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    stock: int = Field(default=0, ge=0)
    category: ProductCategory
    image: Optional[str] = Field(None, max_length=2048)
    unit: ProductUnit = ProductUnit.PIECE


class ProductUpdate(BaseModel):
    """
    Schema for partial product updates. Unknown keys (store, rating,
    num_reviews, ...) are dropped rather than rejected.
    """
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1, max_length=2000)
    price: Optional[float] = Field(None, ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    category: Optional[ProductCategory] = None
    image: Optional[str] = Field(None, max_length=2048)
    is_active: Optional[bool] = None
    unit: Optional[ProductUnit] = None

    # original_price may be cleared explicitly; other fields keep their value when null
    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"original_price"})

    def changes(self) -> dict:
        """Fields the client set, as storable values"""
        data = self.model_dump(mode="json", exclude_unset=True)
        return {
            key: value for key, value in data.items()
            if value is not None or key in self.NULLABLE_FIELDS
        }


class ProductResponse(ProductBase):
    """Schema for product responses including all fields"""
    id: str

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ProductPage(BaseModel):
    """One page of a product search"""
    products: List[ProductResponse]
    page: int
    pages: int
    count: int

    @classmethod
    def empty(cls) -> "ProductPage":
        return cls(products=[], page=1, pages=0, count=0)


class RecommendedProduct(BaseModel):
    """Display projection used by the recommendations strip"""
    id: str
    name: str
    image: Optional[str] = None
    price: float
    original_price: Optional[float] = None
    store: str
    unit: ProductUnit = ProductUnit.PIECE
    category: ProductCategory
    rating: float = 0.0
    num_reviews: int = 0


class MessageResponse(BaseModel):
    message: str
