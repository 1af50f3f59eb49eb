"""
Authorization rules for vendor catalog mutations
"""

from typing import Optional

from bson import ObjectId

from bazzarnet.core.errors import BadRequestError, ForbiddenError
from bazzarnet.core.logger import logger
from bazzarnet.models.product import ProductBase
from bazzarnet.models.user import User, VendorProfile
from bazzarnet.utils.validators import to_object_id

INCOMPLETE_PROFILE_MESSAGE = (
    "Please complete your vendor profile (business description, category, contact phone, "
    "and full address including mobile) before adding products."
)


def require_store(user: User) -> ObjectId:
    """The vendor's store id; vendors without a store cannot manage products"""
    store_id = to_object_id(user.store_id)
    if store_id is None:
        raise ForbiddenError("User is not a vendor or does not have an associated store.")
    return store_id


def ensure_vendor_profile_complete(profile: Optional[VendorProfile]) -> None:
    if profile is None:
        raise BadRequestError(INCOMPLETE_PROFILE_MESSAGE, details={"missing": ["profile"]})

    missing = profile.missing_fields()
    if missing:
        raise BadRequestError(INCOMPLETE_PROFILE_MESSAGE, details={"missing": missing})


def authorize_mutation(user: User, product: ProductBase, action: str = "update") -> None:
    """Only the vendor whose store owns the product may change it"""
    if not user.store_id or str(user.store_id) != str(product.store_id):
        logger.warning(
            f"Vendor {user.id} denied {action} of product owned by store {product.store_id}",
            metadata={
                "event": "ownership_denied",
                "user_id": user.id,
                "user_store_id": user.store_id,
                "product_store_id": product.store_id,
                "action": action,
            }
        )
        raise ForbiddenError(f"Not authorized to {action} this product.")
