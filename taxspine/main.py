"""FastAPI application entry point with lifespan management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taxspine import __version__
from taxspine.api.health import router as health_router
from taxspine.api.middleware import RequestContextMiddleware
from taxspine.api.returns import router as returns_router
from taxspine.core.config import settings
from taxspine.core.logging import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup and log shutdown."""
    configure_logging()
    logger.info(
        "Starting application",
        environment=settings.environment,
        default_tax_year=settings.default_tax_year,
    )

    yield

    logger.info("Shutting down application")


app = FastAPI(
    title="Tax Spine",
    description="Federal Form 1040 computation from income to refund or amount owed",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestContextMiddleware)

app.include_router(health_router)
app.include_router(returns_router)
