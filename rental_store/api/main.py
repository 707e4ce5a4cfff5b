"""FastAPI application factory"""

from typing import Optional
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from rental_store.api.middleware import RequestIDMiddleware, MetricsMiddleware
from rental_store.api.v1 import statement, catalog
from rental_store.infrastructure.observability.logging import setup_logging
from rental_store.rendering.registry import RendererRegistry, default_registry
from rental_store.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(registry: Optional[RendererRegistry] = None) -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Rental Store",
        description="Movie rental charges, loyalty points and statements",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Statement formats are registered here, once per app
    app.state.renderer_registry = registry or default_registry()

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(statement.router, prefix="/v1", tags=["statements"])
    app.include_router(catalog.router, prefix="/v1", tags=["catalog"])

    return app


app = create_app()
