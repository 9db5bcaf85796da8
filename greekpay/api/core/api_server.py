"""
API Server Module

This module contains the main FastAPI application server.
"""

from fastapi import FastAPI
import logging

from greekpay.api.core.api_config import api_config
from greekpay.api.core.api_middleware import setup_middleware
from greekpay.api.routes import fee_routes, health_routes

logger = logging.getLogger(__name__)

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title=api_config.title,
        version=api_config.version,
        description=api_config.description,
        debug=api_config.debug
    )

    setup_middleware(app, api_config)

    app.include_router(
        fee_routes.router,
        prefix="/api/v1",
        tags=["fees"]
    )

    app.include_router(
        health_routes.router,
        prefix="/api/v1",
        tags=["health"]
    )

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": f"{api_config.title} is running",
            "version": api_config.version,
            "status": "healthy"
        }

    logger.info(f"Created {api_config.title} v{api_config.version} (debug: {api_config.debug})")

    return app

# Create the app instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "greekpay.api.core.api_server:app",
        host=api_config.host,
        port=api_config.port,
        reload=api_config.debug
    )
