"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check is additionally served unversioned at /health.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userhub import __version__
from userhub.domain.user import UserRepository
from userhub.presentation.api.dependencies import build_user_repository
from userhub.presentation.api.exception_handlers import setup_exception_handlers
from userhub.presentation.api.logging_config import configure_logging
from userhub.presentation.api.middleware import RequestIdMiddleware
from userhub.presentation.api.routers import health_router, users_router
from userhub_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """CRUD operations over users.

**Rules:**
- `name`: non-empty, at most 100 characters (stored trimmed)
- `email`: must contain `@`, 5-255 characters, unique (stored lowercased)
- `age`: 0-150

**Listing:**
- Sorted by name
- `limit` 1-100 (default 10), `offset` >= 0 (default 0)
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting %s API v%s on %s (environment: %s)",
        settings.app_name,
        API_VERSION,
        settings.address,
        settings.environment,
    )
    logger.info("Serving %d users", app.state.user_repository.count())
    yield
    logger.info("Shutting down %s API...", settings.app_name)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(health_router, prefix="/health", tags=["Health"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])

    return v1_router


def create_app(
    settings: Optional[Settings] = None,
    user_repository: Optional[UserRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    user_repository
        Optional repository override; built from settings otherwise.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    configure_logging(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="CRUD service for the **User** resource.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.settings = settings
    app.state.user_repository = (
        user_repository
        if user_repository is not None
        else build_user_repository(settings)
    )

    # Middleware added last runs first: request ids wrap CORS handling
    if settings.api_cors_enabled:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID"],
        )
    app.add_middleware(RequestIdMiddleware)

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    app.include_router(health_router, prefix="/health", tags=["Health"])

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": f"{API_V1_PREFIX}/health",
                "users": f"{API_V1_PREFIX}/users",
            },
        }

    return app
