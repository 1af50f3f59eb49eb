"""
FastAPI Application - BazzarNet catalog service
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from bazzarnet.core.config import config
from bazzarnet.core.errors import (
    ErrorResponse,
    error_response_handler,
    http_exception_handler,
    validation_exception_handler,
)
from bazzarnet.core.logger import logger
from bazzarnet.core.telemetry import instrument_app
from bazzarnet.db import connect_to_mongo, close_mongo_connection, create_indexes, get_database
from bazzarnet.api import products, reviews, admin, health, operational, home
from bazzarnet.middleware import TraceContextMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting BazzarNet catalog service...")
    await connect_to_mongo()
    await create_indexes(await get_database())

    logger.info(
        "BazzarNet catalog service started successfully",
        metadata={
            "event": "service_started",
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port
        }
    )

    yield

    logger.info("Shutting down BazzarNet catalog service...")
    await close_mongo_connection()


app = FastAPI(
    title="BazzarNet Catalog Service",
    description="Product search, vendor catalogs and reviews for the BazzarNet marketplace",
    version=config.service_version,
    lifespan=lifespan
)

instrument_app(app)

app.add_exception_handler(ErrorResponse, error_response_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.add_middleware(TraceContextMiddleware)

app.include_router(home.router, tags=["home"])
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(operational.router, prefix="/api", tags=["operational"])
app.include_router(products.router, prefix="/api/products", tags=["products"])
app.include_router(reviews.router, prefix="/api/products", tags=["reviews"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])


if __name__ == "__main__":
    import uvicorn

    logger.info(
        f"Starting {config.service_name} on port {config.port}",
        metadata={"event": "uvicorn_start", "port": config.port}
    )

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.environment == "development"
    )
