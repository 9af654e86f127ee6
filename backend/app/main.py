"""FastAPI application factory and main entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from app.core.config import APP_VERSION, get_settings
from app.core.logging import get_logger, setup_logging
from app.mailer.presentation.api import addresses, health

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    setup_logging(level="DEBUG" if settings.debug else settings.log_level)
    logger.info("Mail address service starting up...")
    logger.info(f"Environment: {settings.app_env}")

    yield

    logger.info("Mail address service shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Mail Address Service",
        description="Parse, validate and format mail header addresses",
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.is_development else None,
        redoc_url="/api/redoc" if settings.is_development else None,
    )

    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(addresses.router, prefix="/api", tags=["Addresses"])

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
