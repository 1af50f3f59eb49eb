"""
Administrator operations. Admins may change or remove any product; the
store ownership rule does not apply to them.
"""

from typing import Any, Dict

from bazzarnet.core.logger import logger
from bazzarnet.models.user import User
from bazzarnet.repositories.review import ReviewRepository
from bazzarnet.repositories.store import StoreRepository
from bazzarnet.schemas.admin import DashboardStatsResponse
from bazzarnet.schemas.product import ProductResponse
from bazzarnet.services.product import ProductService


class AdminService:
    def __init__(
        self,
        product_service: ProductService,
        store_repository: StoreRepository,
        review_repository: ReviewRepository,
    ):
        self.product_service = product_service
        self.store_repository = store_repository
        self.review_repository = review_repository

    async def update_product(self, admin: User, product_id: str, payload: Dict[str, Any]) -> ProductResponse:
        await self.product_service.get_existing(product_id)
        product = await self.product_service.save_changes(product_id, payload, updated_by=admin.id)
        logger.info(
            f"Admin updated product {product_id}",
            user_id=admin.id,
            metadata={"event": "admin_update_product", "product_id": product_id}
        )
        return product

    async def delete_product(self, admin: User, product_id: str) -> None:
        await self.product_service.remove(product_id, deleted_by=admin.id)
        logger.info(
            f"Admin deleted product {product_id}",
            user_id=admin.id,
            metadata={"event": "admin_delete_product", "product_id": product_id}
        )

    async def get_dashboard_stats(self) -> DashboardStatsResponse:
        products = await self.product_service.repository.get_stats()
        stores = await self.store_repository.get_stats()
        reviews = await self.review_repository.count()

        stats = DashboardStatsResponse(
            total_products=products["total"],
            active_products=products["active"],
            total_stores=stores["total"],
            active_stores=stores["active"],
            total_reviews=reviews,
        )
        logger.info(
            "Dashboard statistics fetched",
            metadata={"event": "admin_stats_fetched", "stats": stats.model_dump()}
        )
        return stats
