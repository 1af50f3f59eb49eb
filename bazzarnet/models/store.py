"""
Store reference model. Stores are managed by the store service; the catalog
only reads them to resolve pincodes and to populate product listings.
"""

from typing import Optional

from pydantic import BaseModel, Field


class StoreAddress(BaseModel):
    house_no: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pin_code: Optional[str] = None


class Store(BaseModel):
    id: Optional[str] = None
    name: str
    logo: Optional[str] = None
    address: StoreAddress = Field(default_factory=StoreAddress)
    is_active: bool = True
