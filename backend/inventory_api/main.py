"""
Inventory API - Backend
CRUD over products, suppliers and orders
"""
import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from inventory_api.api import orders, products, suppliers
from inventory_api.core.config import settings
from inventory_api.core.database import Database
from inventory_api.core.exceptions import StorageError, register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database pool at startup and close it on shutdown"""
    database = Database(
        settings.DATABASE_URL,
        min_connections=settings.DB_POOL_MIN,
        max_connections=settings.DB_POOL_MAX,
    )
    database.open(
        max_retries=settings.DB_CONNECT_RETRIES,
        retry_delay=settings.DB_CONNECT_RETRY_DELAY,
    )
    app.state.database = database
    try:
        yield
    finally:
        database.close()


app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    lifespan=lifespan,
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(products.router, prefix="/api/products", tags=["Products"])
app.include_router(suppliers.router, prefix="/api/suppliers", tags=["Suppliers"])
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])


@app.get("/")
def root():
    """Root endpoint - API status"""
    return {
        "message": settings.API_TITLE,
        "status": "online",
        "version": settings.API_VERSION,
    }


@app.get("/health")
def health(request: Request):
    """Health check endpoint - tests database connectivity"""
    start_time = time.time()

    db_status = "unknown"
    db_latency_ms = None
    db_error = None

    database = getattr(request.app.state, "database", None)
    try:
        if database is None:
            raise StorageError("Database pool not initialized")

        db_start = time.time()
        database.ping()
        db_latency_ms = round((time.time() - db_start) * 1000, 2)
        db_status = "connected"
    except StorageError as e:
        db_status = "disconnected"
        db_error = e.message

    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": "inventory-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error,
        },
        "total_latency_ms": total_latency_ms,
    }


def run() -> None:
    """Start the HTTP server on the configured port"""
    logger.info(f"Server is running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
