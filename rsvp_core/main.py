"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rsvp_core import __version__
from rsvp_core.api.routes import health, reader
from rsvp_core.config import get_settings
from rsvp_core.logging_config import setup_logging

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    setup_logging(
        settings.log_level,
        log_dir=settings.log_dir,
        enable_console_logging=settings.log_console,
        service=settings.app_name,
    )
    logger.info("%s %s starting", settings.app_name, __version__)
    yield


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="RSVP text engine",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(reader.router, prefix="/api/reader", tags=["reader"])


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": __version__,
        "docs": "/docs" if settings.debug else None,
    }
