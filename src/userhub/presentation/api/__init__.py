"""REST API presentation layer for userhub.

This package provides a FastAPI-based REST API over the User resource.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain error -> HTTP response mapping
    ├── logging_config.py     # Text/JSON logging with request ids
    ├── middleware.py         # Request id and request logging
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from userhub.presentation.api.app import create_app

__all__ = ["create_app"]
