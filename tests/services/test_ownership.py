"""Tests for vendor authorization rules"""
import pytest
from bson import ObjectId

from bazzarnet.core.errors import BadRequestError, ForbiddenError
from bazzarnet.models.product import StoreSummary
from bazzarnet.models.user import User
from bazzarnet.services.ownership import authorize_mutation, ensure_vendor_profile_complete, require_store

STORE_ID = "64b7f0c2a1b2c3d4e5f60718"
OTHER_STORE_ID = "64b7f0c2a1b2c3d4e5f60799"


class TestRequireStore:

    def test_returns_store_object_id(self, vendor_user):
        assert require_store(vendor_user) == ObjectId(STORE_ID)

    @pytest.mark.parametrize("store_id", [None, "", "garbage"])
    def test_vendor_without_store_is_forbidden(self, store_id):
        user = User(id="u1", roles=["vendor"], store_id=store_id)

        with pytest.raises(ForbiddenError) as exc_info:
            require_store(user)

        assert exc_info.value.status_code == 403


class TestAuthorizeMutation:

    def test_owner_is_allowed(self, vendor_user, make_product):
        authorize_mutation(vendor_user, make_product(store_id=STORE_ID))

    def test_owner_is_allowed_with_populated_store(self, vendor_user, make_product):
        product = make_product(store_id=STORE_ID)
        product.store = StoreSummary(id=STORE_ID, name="Sharma Kirana")

        authorize_mutation(vendor_user, product)

    def test_other_store_is_forbidden(self, vendor_user, make_product):
        with pytest.raises(ForbiddenError) as exc_info:
            authorize_mutation(vendor_user, make_product(store_id=OTHER_STORE_ID), action="delete")

        assert exc_info.value.message == "Not authorized to delete this product."

    def test_user_without_store_is_forbidden(self, customer_user, make_product):
        with pytest.raises(ForbiddenError):
            authorize_mutation(customer_user, make_product())


class TestVendorProfile:

    def test_complete_profile_passes(self, complete_profile):
        ensure_vendor_profile_complete(complete_profile)

    def test_missing_profile(self):
        with pytest.raises(BadRequestError):
            ensure_vendor_profile_complete(None)

    @pytest.mark.parametrize("field", ["description", "category", "phone"])
    def test_missing_top_level_field(self, complete_profile, field):
        profile = complete_profile.model_copy(update={field: "  "})

        with pytest.raises(BadRequestError) as exc_info:
            ensure_vendor_profile_complete(profile)

        assert exc_info.value.details["missing"] == [field]

    @pytest.mark.parametrize("field", ["house_no", "city", "state", "pin_code", "mobile"])
    def test_missing_address_field(self, complete_profile, field):
        address = complete_profile.address.model_copy(update={field: None})
        profile = complete_profile.model_copy(update={"address": address})

        with pytest.raises(BadRequestError) as exc_info:
            ensure_vendor_profile_complete(profile)

        assert exc_info.value.details["missing"] == [f"address.{field}"]

    def test_street_is_optional(self, complete_profile):
        address = complete_profile.address.model_copy(update={"street": None})
        ensure_vendor_profile_complete(complete_profile.model_copy(update={"address": address}))
