"""
FastAPI application entry point
Reference: https://fastapi.tiangolo.com/tutorial/bigger-applications/
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from sqlalchemy import text

from inventory.api.api import api_router
from inventory.core.config import settings
from inventory.core.database import engine
from inventory.models import Base

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events
    Validates the database connection on startup
    Reference: https://fastapi.tiangolo.com/advanced/events/
    """
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if settings.AUTO_CREATE_TABLES:
                await conn.run_sync(Base.metadata.create_all)
                logger.info("Inventory tables created")
        logger.info("Database connection successful")
    except Exception as e:
        # Let the app start so the health endpoints can report the problem
        logger.error(f"Database connection failed: {e}")

    yield

    await engine.dispose()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Shoe inventory catalog: brands, categories, shoes and SKUs",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.include_router(api_router)


@app.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    """Send visitors to the inventory home page"""
    return RedirectResponse(f"{settings.INVENTORY_PREFIX}/")
