"""
Order reference model. The catalog only checks whether a delivered order exists.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class OrderItem(BaseModel):
    product: str
    quantity: int = Field(default=1, ge=1)
    price: float = Field(default=0.0, ge=0)


class Order(BaseModel):
    id: Optional[str] = None
    user: str
    items: List[OrderItem] = []
    order_status: OrderStatus = OrderStatus.PENDING
