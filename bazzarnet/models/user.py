"""
User models: the authenticated principal decoded from the JWT, and the
vendor profile stored in the users collection
"""

from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRole(str, Enum):
    CUSTOMER = "customer"
    VENDOR = "vendor"
    ADMIN = "admin"


class User(BaseModel):
    """User model from JWT token payload"""

    id: str
    email: Optional[EmailStr] = None
    roles: List[str] = []
    store_id: Optional[str] = None

    def has_role(self, role: str) -> bool:
        """Check if user has a specific role"""
        role = role.value if isinstance(role, UserRole) else role
        return role.lower() in [r.lower() for r in self.roles]

    def is_admin(self) -> bool:
        return self.has_role(UserRole.ADMIN)

    def is_vendor(self) -> bool:
        return self.has_role(UserRole.VENDOR)


class VendorAddress(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    house_no: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pin_code: Optional[str] = None
    mobile: Optional[str] = None


class VendorProfile(BaseModel):
    """Business profile a vendor must complete before listing products"""

    # Owned by the user service; phone numbers and pin codes may be stored as numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    phone: Optional[str] = None
    address: VendorAddress = Field(default_factory=VendorAddress)

    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("description", "category", "phone")
    REQUIRED_ADDRESS_FIELDS: ClassVar[Tuple[str, ...]] = ("house_no", "city", "state", "pin_code", "mobile")

    def missing_fields(self) -> List[str]:
        """Names of required profile fields that are empty"""
        missing = [name for name in self.REQUIRED_FIELDS if not (getattr(self, name) or "").strip()]
        missing += [
            f"address.{name}"
            for name in self.REQUIRED_ADDRESS_FIELDS
            if not (getattr(self.address, name) or "").strip()
        ]
        return missing

    def is_complete(self) -> bool:
        return not self.missing_fields()
