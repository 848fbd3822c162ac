"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
Startup: Settings → Logging → DI container (MongoDB ping) → serve traffic
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_api import __version__
from employee_api.api.v1 import employee_router
from employee_api.core.config import Settings, get_settings
from employee_api.core.logging_config import setup_logging
from employee_api.di.base_container import BaseContainer
from employee_api.di.container import DIContainer
from employee_api.exceptions import AppError
from employee_api.middleware.error_handler import add_exception_handlers

logger = logging.getLogger(__name__)


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[BaseContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - CORS middleware for the configured client origin
    - Exception handlers mapping application errors to HTTP responses
    - API route registration
    - A lifespan that builds the DI container (connecting to MongoDB)
      unless one is supplied

    Args:
        settings: Application settings (defaults to environment settings)
        container: Pre-built container; skips the MongoDB connection when given

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        if application.state.container is None:
            setup_logging(settings.log_level)
            try:
                application.state.container = DIContainer(settings)
            except AppError as exc:
                # Startup failures are fatal: the server must not accept traffic
                logger.critical(f"❌ Startup failed: {exc.message}")
                raise
        logger.info("✅ Employee API ready")

        yield

        application.state.container.close()
        logger.info("🛑 Employee API stopped")

    application = FastAPI(
        title="Employee API",
        description="CRUD API for employee records stored in MongoDB",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.container = container

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.client_origin],
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Origin", "Content-Type", "Accept"],
    )

    add_exception_handlers(application)

    # Register API routers
    application.include_router(employee_router, prefix="/api/employees")

    @application.get("/")
    def root():
        """Root endpoint - service banner."""
        return {
            "status": "running",
            "service": "Employee API",
            "version": __version__,
            "docs": "/docs"
        }

    @application.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
