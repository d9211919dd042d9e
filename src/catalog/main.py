import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.errors import register_exception_handlers
from catalog.api.v1 import products
from catalog.core.config import settings
from catalog.core.database import create_tables, engine
from catalog.middleware.metrics import PrometheusMiddleware, metrics_endpoint

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    logger.info("Starting application...")

    if settings.DB_AUTO_CREATE:
        logger.info("Creating database tables...")
        await create_tables()

    yield

    logger.info("Disposing database engine")
    await engine.dispose()


app = FastAPI(
    title="Product Catalog",
    version="1.0.0",
    description="Product CRUD API with a uniform response envelope",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Prometheus Metrics Middleware (must be first to capture all requests)
app.add_middleware(PrometheusMiddleware, api_prefix=settings.API_V1_PREFIX)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include API routers
app.include_router(
    products.router,
    prefix=f"{settings.API_V1_PREFIX}/products",
    tags=["products"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Prometheus metrics endpoint
app.add_route("/metrics", metrics_endpoint)
