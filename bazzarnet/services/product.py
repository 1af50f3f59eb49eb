"""
Product service containing catalog business logic
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from bazzarnet.core.config import config
from bazzarnet.core.errors import BadRequestError, NotFoundError, format_validation_errors
from bazzarnet.core.logger import logger
from bazzarnet.models.user import User
from bazzarnet.repositories.product import ProductRepository
from bazzarnet.repositories.store import StoreRepository
from bazzarnet.repositories.user import UserRepository
from bazzarnet.schemas.product import (
    ProductCreate,
    ProductPage,
    ProductResponse,
    ProductUpdate,
    RecommendedProduct,
)
from bazzarnet.services.catalog_query import build_product_query, parse_store_id
from bazzarnet.services.ownership import (
    authorize_mutation,
    ensure_vendor_profile_complete,
    require_store,
)
from bazzarnet.services.pagination import Pagination


class ProductService:
    """Service layer for product business logic"""

    def __init__(
        self,
        repository: ProductRepository,
        store_repository: StoreRepository,
        user_repository: UserRepository,
    ):
        self.repository = repository
        self.store_repository = store_repository
        self.user_repository = user_repository

    async def _resolve_pincode(self, pincode: Optional[str]):
        """None when no pincode was given, else the ids of active stores serving it"""
        if not pincode or not pincode.strip():
            return None
        return await self.store_repository.find_active_ids_by_pincode(pincode.strip())

    async def _populate_stores(self, products: List[ProductResponse]) -> List[ProductResponse]:
        summaries = await self.store_repository.get_summaries(p.store_id for p in products)
        for product in products:
            summary = summaries.get(product.store_id)
            if summary is not None:
                product.store = summary
        return products

    async def search_products(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        store: Optional[str] = None,
        pincode: Optional[str] = None,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> ProductPage:
        """Filtered, paginated product listing"""
        pagination = Pagination(page=page, limit=limit if limit is not None else config.default_page_size)

        # Reject a malformed store id before touching the database
        store_id = parse_store_id(store)

        pincode_store_ids = await self._resolve_pincode(pincode)
        if pincode_store_ids is not None and not pincode_store_ids:
            logger.info(
                f"No active stores serve pincode {pincode}",
                metadata={"event": "search_products_no_stores", "pincode": pincode}
            )
            return ProductPage.empty()

        started = time.time()
        query = build_product_query(search, category, store_id, pincode_store_ids)
        count = await self.repository.count(query)

        products: List[ProductResponse] = []
        if not pagination.is_empty:
            products = await self.repository.find_page(query, pagination.skip, pagination.limit)
            products = await self._populate_stores(products)

        logger.info(
            f"Fetched {len(products)} products",
            metadata={
                "event": "search_products",
                "count": len(products),
                "total": count,
                "filters": {
                    "search": search,
                    "category": category,
                    "store": store,
                    "pincode": pincode,
                },
                "page": pagination.page,
                "limit": pagination.limit,
            }
        )
        logger.performance(
            "search_products",
            int((time.time() - started) * 1000),
            threshold_ms=config.slow_query_threshold_ms,
        )

        return ProductPage(
            products=products,
            page=pagination.page,
            pages=pagination.total_pages(count),
            count=count,
        )

    async def get_product(self, product_id: str) -> ProductResponse:
        """Get product by ID with its store name and logo"""
        product = await self.repository.get_by_id(product_id)
        if not product:
            raise NotFoundError("Product not found")

        await self._populate_stores([product])
        logger.info(
            f"Fetched product {product_id}",
            metadata={"event": "get_product", "product_id": product_id}
        )
        return product

    async def get_recommended_products(self, pincode: Optional[str] = None) -> List[RecommendedProduct]:
        """Random selection of active products, scoped to a pincode when one is given"""
        query: Dict[str, Any] = {"is_active": True}

        pincode_store_ids = await self._resolve_pincode(pincode)
        if pincode_store_ids is not None:
            if not pincode_store_ids:
                return []
            query["store"] = {"$in": pincode_store_ids}

        products = await self.repository.sample(query, config.recommended_sample_size)
        logger.debug(
            f"Sampled {len(products)} recommended products",
            metadata={"event": "recommended_products", "pincode": pincode, "count": len(products)}
        )
        return products

    async def create_product(self, user: User, product_data: ProductCreate) -> ProductResponse:
        """Create a product in the acting vendor's store"""
        store_id = require_store(user)

        profile = await self.user_repository.get_vendor_profile(user.id)
        ensure_vendor_profile_complete(profile)

        now = datetime.now(timezone.utc)
        document = product_data.model_dump(mode="json")
        document.update({
            "image": product_data.image or config.default_product_image,
            "store": store_id,
            "rating": 0.0,
            "num_reviews": 0,
            "is_active": True,
            "created_at": now,
            "updated_at": now,
        })

        product = await self.repository.create(document)
        logger.info(
            f"Created product {product.id}",
            user_id=user.id,
            metadata={"event": "create_product", "product_id": product.id, "store_id": str(store_id)}
        )
        return product

    async def get_existing(self, product_id: str) -> ProductResponse:
        product = await self.repository.get_by_id(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    async def save_changes(self, product_id: str, payload: Any, updated_by: str) -> ProductResponse:
        """Validate a partial update payload and persist the fields it sets"""
        if not isinstance(payload, dict):
            raise BadRequestError("Validation error", details={"errors": ["body: Input should be a JSON object"]})

        try:
            changes = ProductUpdate.model_validate(payload).changes()
        except ValidationError as e:
            raise BadRequestError("Validation error", details={"errors": format_validation_errors(e.errors())})

        if not changes:
            return await self.get_existing(product_id)

        product = await self.repository.update_fields(product_id, changes)
        if not product:
            raise NotFoundError("Product not found")

        logger.info(
            f"Updated product {product_id}",
            user_id=updated_by,
            metadata={"event": "update_product", "product_id": product_id, "fields": sorted(changes)}
        )
        return product

    async def update_product(self, user: User, product_id: str, payload: Any) -> ProductResponse:
        """
        Partial update by the owning vendor. Ownership is checked before the
        payload is validated, so non-owners always get 403.
        """
        product = await self.get_existing(product_id)
        authorize_mutation(user, product, action="update")
        return await self.save_changes(product_id, payload, updated_by=user.id)

    async def remove(self, product_id: str, deleted_by: str) -> None:
        if not await self.repository.delete(product_id):
            raise NotFoundError("Product not found")

        logger.info(
            f"Deleted product {product_id}",
            user_id=deleted_by,
            metadata={"event": "delete_product", "product_id": product_id}
        )

    async def delete_product(self, user: User, product_id: str) -> None:
        product = await self.get_existing(product_id)
        authorize_mutation(user, product, action="delete")
        await self.remove(product_id, deleted_by=user.id)
