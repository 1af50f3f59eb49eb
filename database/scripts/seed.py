#!/usr/bin/env python3
"""
Seed a development database with stores, users, products and a delivered
order, so that every catalog endpoint has something to return.

Usage: python database/scripts/seed.py
"""

import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from dotenv import load_dotenv

load_dotenv()

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient

from bazzarnet.core.config import config
from bazzarnet.db.indexes import create_indexes
from bazzarnet.models.order import OrderStatus

SEEDED_COLLECTIONS = ("stores", "users", "products", "orders", "reviews")


class CatalogDatabaseSeeder:
    def __init__(self):
        self.client = None
        self.db = None

    async def connect(self):
        """Establish MongoDB connection"""
        print(f"Connecting to MongoDB database '{config.mongodb_database}'...")
        self.client = AsyncIOMotorClient(config.mongodb_url)
        self.db = self.client[config.mongodb_database]
        await self.db.command('ping')
        print("Successfully connected to MongoDB!")

    async def seed_data(self):
        """Main seeding method"""
        print("Seeding catalog data...")
        await self.clear_data()
        await create_indexes(self.db)

        stores = await self.seed_stores()
        vendors, customer_id = await self.seed_users(stores)
        products = await self.seed_products(stores)
        await self.seed_delivered_order(customer_id, products[:2])

        print("Catalog data seeding completed successfully!")
        print(f"Vendor user ids: {[str(v) for v in vendors]}")
        print(f"Customer user id: {customer_id}")

    async def clear_data(self):
        for name in SEEDED_COLLECTIONS:
            result = await self.db[name].delete_many({})
            print(f"Deleted {result.deleted_count} documents from '{name}'")

    async def seed_stores(self):
        stores = [
            {
                "_id": ObjectId(),
                "name": "Sharma Kirana",
                "logo": "https://via.placeholder.com/100?text=Sharma",
                "address": {"house_no": "12", "street": "MG Road", "city": "Pune",
                            "state": "Maharashtra", "pin_code": "411001"},
                "is_active": True,
            },
            {
                "_id": ObjectId(),
                "name": "Fresh Bakes",
                "logo": "https://via.placeholder.com/100?text=Bakes",
                "address": {"house_no": "4B", "street": "Park Street", "city": "Kolkata",
                            "state": "West Bengal", "pin_code": "700016"},
                "is_active": True,
            },
        ]
        await self.db.stores.insert_many(stores)
        print(f"Seeded {len(stores)} stores")
        return stores

    async def seed_users(self, stores):
        vendors = []
        for store in stores:
            vendor_id = ObjectId()
            vendors.append(vendor_id)
            await self.db.users.insert_one({
                "_id": vendor_id,
                "name": f"{store['name']} Owner",
                "role": "vendor",
                "store_id": store["_id"],
                "description": f"{store['name']} serves the neighbourhood",
                "category": "Groceries",
                "phone": "9800000000",
                "address": {**store["address"], "mobile": "9800000001"},
            })

        customer_id = ObjectId()
        await self.db.users.insert_one({
            "_id": customer_id,
            "name": "Asha Customer",
            "role": "customer",
            "profile_image": "https://via.placeholder.com/64?text=A",
        })
        print(f"Seeded {len(vendors)} vendors and 1 customer")
        return vendors, customer_id

    async def seed_products(self, stores):
        now = datetime.now(timezone.utc)
        catalog = [
            (stores[0], "Basmati Rice", "Aged long grain rice", 120.0, 140.0, 50, "kg", "Groceries"),
            (stores[0], "Toor Dal", "Split pigeon peas", 95.0, None, 80, "kg", "Groceries"),
            (stores[0], "Sunflower Oil", "Refined cooking oil", 180.0, 199.0, 30, "L", "Groceries"),
            (stores[1], "Whole Wheat Bread", "Fresh baked every morning", 45.0, None, 20, "pc", "Bakery"),
            (stores[1], "Butter Cookies", "Crisp cookies, 200 g pack", 60.0, 75.0, 40, "pack", "Bakery"),
        ]
        products = [
            {
                "_id": ObjectId(),
                "name": name,
                "description": description,
                "price": price,
                "original_price": original_price,
                "stock": stock,
                "unit": unit,
                "category": category,
                "image": config.default_product_image,
                "store": store["_id"],
                "rating": 0.0,
                "num_reviews": 0,
                "is_active": True,
                "created_at": now,
                "updated_at": now,
            }
            for store, name, description, price, original_price, stock, unit, category in catalog
        ]
        await self.db.products.insert_many(products)
        print(f"Seeded {len(products)} products")
        return products

    async def seed_delivered_order(self, customer_id, products):
        await self.db.orders.insert_one({
            "user": customer_id,
            "items": [{"product": p["_id"], "quantity": 1, "price": p["price"]} for p in products],
            "order_status": OrderStatus.DELIVERED.value,
        })
        print(f"Seeded 1 delivered order covering {len(products)} products")

    async def close(self):
        if self.client:
            self.client.close()
            print("MongoDB connection closed")


async def main():
    seeder = CatalogDatabaseSeeder()
    try:
        await seeder.connect()
        await seeder.seed_data()
    finally:
        await seeder.close()


if __name__ == "__main__":
    asyncio.run(main())
