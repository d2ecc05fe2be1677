import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

from coverage_registry import __version__
from coverage_registry.api.v1 import api_router
from coverage_registry.core.config import settings
from coverage_registry.core.exceptions import setup_exception_handlers
from coverage_registry.core.logging_config import setup_logging
from coverage_registry.services.registry_builder import Registry, create_registry


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses"""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        if settings.ENVIRONMENT == "production":
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

        return response


def create_app(registry: Optional[Registry] = None) -> FastAPI:
    app = FastAPI(
        title="Coverage Registry API",
        description="Role-gated insurance policy registry with price-referenced premiums",
        version=__version__,
        docs_url="/docs" if settings.ENVIRONMENT == "development" else None,
        redoc_url="/redoc" if settings.ENVIRONMENT == "development" else None,
    )

    # One registry per app: roles, policies and selections live in memory
    app.state.registry = registry or create_registry()

    if not os.environ.get("TESTING"):
        app.add_middleware(SecurityHeadersMiddleware)

    setup_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.get("/")
    async def root():
        return {"message": "Coverage Registry API", "version": __version__}

    @app.get("/health")
    async def health_check():
        ledger = app.state.registry.ledger
        return {"status": "healthy", "policies": ledger.policy_count}

    return app


if not os.environ.get("TESTING"):
    setup_logging(settings.LOG_LEVEL)
else:
    logging.getLogger().setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True if settings.ENVIRONMENT == "development" else False
    )
