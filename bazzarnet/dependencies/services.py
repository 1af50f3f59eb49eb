"""
Dependency injection for repositories and services
"""

from fastapi import Depends

from bazzarnet.db.mongodb import PRODUCTS, REVIEWS, STORES, ORDERS, USERS, get_collection
from bazzarnet.repositories import (
    OrderRepository,
    ProductRepository,
    ReviewRepository,
    StoreRepository,
    UserRepository,
)
from bazzarnet.services import AdminService, ProductService, ReviewService


async def get_product_repository() -> ProductRepository:
    return ProductRepository(await get_collection(PRODUCTS))


async def get_review_repository() -> ReviewRepository:
    return ReviewRepository(await get_collection(REVIEWS))


async def get_store_repository() -> StoreRepository:
    return StoreRepository(await get_collection(STORES))


async def get_order_repository() -> OrderRepository:
    return OrderRepository(await get_collection(ORDERS))


async def get_user_repository() -> UserRepository:
    return UserRepository(await get_collection(USERS))


async def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
    store_repository: StoreRepository = Depends(get_store_repository),
    user_repository: UserRepository = Depends(get_user_repository),
) -> ProductService:
    """Get product service instance"""
    return ProductService(repository, store_repository, user_repository)


async def get_review_service(
    repository: ReviewRepository = Depends(get_review_repository),
    product_repository: ProductRepository = Depends(get_product_repository),
    order_repository: OrderRepository = Depends(get_order_repository),
) -> ReviewService:
    return ReviewService(repository, product_repository, order_repository)


async def get_admin_service(
    product_service: ProductService = Depends(get_product_service),
    store_repository: StoreRepository = Depends(get_store_repository),
    review_repository: ReviewRepository = Depends(get_review_repository),
) -> AdminService:
    return AdminService(product_service, store_repository, review_repository)
