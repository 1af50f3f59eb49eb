"""
Review submission and product rating aggregation
"""

from typing import AsyncContextManager, Callable, List

from bazzarnet.core.errors import ConflictError, ForbiddenError, NotFoundError
from bazzarnet.core.logger import logger
from bazzarnet.db.mongodb import transaction
from bazzarnet.models.review import Review
from bazzarnet.models.user import User
from bazzarnet.repositories.order import OrderRepository
from bazzarnet.repositories.product import ProductRepository
from bazzarnet.repositories.review import ALREADY_REVIEWED, ReviewRepository
from bazzarnet.schemas.review import ReviewResponse


class ReviewService:
    """
    Reviews are accepted only from customers with a delivered order for the
    product, once per customer. Every accepted review recomputes the
    product's rating and review count from the full review set.
    """

    def __init__(
        self,
        repository: ReviewRepository,
        product_repository: ProductRepository,
        order_repository: OrderRepository,
        start_transaction: Callable[[], AsyncContextManager] = transaction,
    ):
        self.repository = repository
        self.product_repository = product_repository
        self.order_repository = order_repository
        self.start_transaction = start_transaction

    async def submit_review(self, user: User, product_id: str, rating: int, comment: str) -> Review:
        product = await self.product_repository.get_by_id(product_id)
        if not product:
            raise NotFoundError("Product not found")

        if not await self.order_repository.has_delivered_purchase(user.id, product_id):
            raise ForbiddenError("You can only review products you have purchased and received.")

        if await self.repository.exists_for(user.id, product_id):
            raise ConflictError(ALREADY_REVIEWED)

        async with self.start_transaction() as session:
            review = await self.repository.create(user.id, product_id, rating, comment, session=session)
            average, count = await self.repository.rating_summary(product_id, session=session)
            await self.product_repository.set_review_aggregates(product_id, average, count, session=session)

        logger.info(
            f"Review added for product {product_id}",
            user_id=user.id,
            metadata={
                "event": "review_created",
                "product_id": product_id,
                "rating": rating,
                "new_average": average,
                "num_reviews": count,
            }
        )
        return review

    async def list_reviews(self, product_id: str) -> List[ReviewResponse]:
        reviews = await self.repository.list_for_product(product_id)
        logger.debug(
            f"Fetched {len(reviews)} reviews for product {product_id}",
            metadata={"event": "list_reviews", "product_id": product_id, "count": len(reviews)}
        )
        return reviews
