# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Local application imports
from .api.v1 import product_router
from .core.config import get_settings
from .core.exceptions import CatalogError
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    The MongoDB client connects lazily on first use; shutdown closes it.
    """
    settings = get_settings()
    logger.info(
        f"Storefront catalog API starting (db={settings.mongo_database_name}, "
        f"uploads={settings.product_image_upload_dir})"
    )

    yield

    try:
        close_database()
    except Exception as e:
        logger.error(f"Error closing MongoDB client: {e}", exc_info=True)

    logger.info("Application shutdown complete")


async def catalog_exception_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Render every CatalogError as {message, errors?} with its status code"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging level
    - CORS middleware configuration
    - Catalog error rendering
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="Storefront Catalog API",
        version="1.0.0",
        description="Product catalog management for the storefront",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(CatalogError, catalog_exception_handler)

    application.include_router(product_router, prefix="/api/product")

    @application.get("/health", tags=["health"])
    async def health_check() -> dict:
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
