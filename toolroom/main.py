"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
Startup: connect to MongoDB → build the DI container → load the tools catalog.
"""
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from toolroom import __version__
from toolroom.api.v1 import (
    history_router,
    staff_router,
    team_router,
    tool_router,
    transaction_router,
)
from toolroom.application.services.tools_catalog import ToolsCatalog
from toolroom.core.config import get_settings
from toolroom.di.container import get_container
from toolroom.infrastructure.db.mongo_connection import get_mongo_client


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Startup/shutdown event handlers for the database and tools catalog

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Create FastAPI app
    application = FastAPI(
        title="Toolroom API",
        description="Tool checkout and inventory tracking for workshop staff",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(tool_router, prefix="/api/v1/tools")
    application.include_router(staff_router, prefix="/api/v1/staff")
    application.include_router(transaction_router, prefix="/api/v1/transactions")
    application.include_router(history_router, prefix="/api/v1/history")
    application.include_router(team_router, prefix="/api/v1/teams")

    @application.on_event("startup")
    async def startup_event():
        """
        Startup sequence:
        1. Build the DI container (connects to MongoDB)
        2. Load the tools catalog so the first list request is served from memory
        """
        container = get_container()
        print("[main] 📦 Dependency container ready")

        catalog = container.get(ToolsCatalog)
        if catalog.refresh():
            print(f"[main] 🧰 Tools catalog loaded ({catalog.total_tools} tools)")
        else:
            print(f"[main] ⚠️  Tools catalog failed to load: {catalog.error_message}")

        print("[main] ✅ All services started successfully!")

    @application.on_event("shutdown")
    async def shutdown_event():
        """Close the MongoDB connection."""
        get_mongo_client().close()
        print("[main] 🛑 All services stopped")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "status": "running",
            "service": "Toolroom API",
            "version": __version__,
            "docs": "/docs",
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        database = "up" if get_mongo_client().ping() else "down"
        return {"status": "healthy" if database == "up" else "degraded", "database": database}

    return application


# Create application instance
app = create_application()
